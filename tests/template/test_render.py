"""
Сценарные тесты полного конвейера рендеринга.
"""

import pytest

from mhb.template import TemplateProcessor, render


class TestBasics:

    @pytest.mark.parametrize("context", [{}, {"a": "x"}, None])
    def test_empty_template(self, context):
        assert render("", context) == ""

    @pytest.mark.parametrize("text", [
        "plain text",
        "<div class=\"x\">\n  text\n</div>",
        "single { braces } and }} stray closers",
    ])
    def test_template_without_directives_unchanged(self, text):
        assert render(text, {"a": "x"}) == text

    def test_processor_is_reusable(self):
        processor = TemplateProcessor()

        assert processor.render("{{a}}", {"a": 1}) == "1"
        assert processor.render("{{a}}", {"a": 2}) == "2"


class TestVariables:

    def test_link_scenario(self):
        context = {"link": "https://x.com", "name": "X"}

        result = render('<a href="{{link}}">{{name}}</a>', context)

        assert result == '<a href="https://x.com">X</a>'

    def test_missing_variable_removed(self):
        result = render("<div>\n    <p>{{name}}</p>\n</div>", {})

        assert "{{name}}" not in result
        assert result == "<div>\n    <p></p>\n</div>"

    def test_repeated_variable(self):
        assert render("{{a}}-{{a}}", {"a": "x"}) == "x-x"

    def test_non_string_values(self):
        assert render("{{n}} {{f}} {{b}}", {"n": 3, "f": 2.5, "b": True}) == "3 2.5 true"

    def test_stray_closer_is_removed(self):
        """Закрывающий тег без блока обрабатывается как переменная без значения."""
        assert render("x{{/if}}y", {}) == "xy"


class TestConditionals:

    def test_visible_scenario(self):
        template = "{{#if visible}}<p>{{a}}</p>{{/if}}"

        assert render(template, {"visible": True, "a": "hi"}) == "<p>hi</p>"
        assert render(template, {"a": "hi"}) == ""

    def test_truth_table(self):
        template = "{{#if k}}BODY{{/if}}"

        assert render(template, {"k": True}) == "BODY"
        assert render(template, {"k": "true"}) == "BODY"
        assert render(template, {"k": False}) == ""
        assert render(template, {}) == ""

    @pytest.mark.parametrize("value", ["True", "yes", 1, [{"a": 1}], {"a": 1}])
    def test_only_literal_true_is_truthy(self, value):
        assert render("{{#if k}}BODY{{/if}}", {"k": value}) == ""

    def test_sibling_conditionals(self):
        template = (
            "<div>\n"
            "{{#if visible}}\n<p>{{author}}</p>\n{{/if}}\n"
            "{{#if nonVisible}}\n<p>{{author2}}</p>\n{{/if}}\n"
            "</div>"
        )
        context = {
            "visible": True,
            "author": "H. Murakami",
            "nonVisible": False,
            "author2": "J.R.R. Tolkien",
        }

        result = render(template, context)

        assert result == "<div>\n\n<p>H. Murakami</p>\n\n\n</div>"

    def test_outer_true_inner_false(self):
        template = (
            "{{#if visible}}"
            "<p>{{a1}}</p>"
            "{{#if nestedVisible}}<p>{{a2}}</p>{{/if}}"
            "{{#if nestedNonVisible}}<p>{{a3}}</p>{{/if}}"
            "{{/if}}"
        )
        context = {
            "visible": True,
            "nestedVisible": True,
            "nestedNonVisible": False,
            "a1": "Playstation 3",
            "a2": "Xbox 360",
            "a3": "Xbox One",
        }

        result = render(template, context)

        assert result == "<p>Playstation 3</p><p>Xbox 360</p>"

    def test_outer_false_wins(self):
        template = "a{{#if outer}}<{{#if inner}}X{{/if}}>{{/if}}b"

        assert render(template, {"outer": False, "inner": True}) == "ab"

    def test_deeply_nested(self):
        template = "{{#if a}}1{{#if b}}2{{#if c}}3{{/if}}{{/if}}{{/if}}"

        assert render(template, {"a": True, "b": True, "c": True}) == "123"
        assert render(template, {"a": True, "b": True}) == "12"
        assert render(template, {"a": True, "c": True}) == "1"

    def test_unclosed_conditional_left_verbatim(self):
        assert render("{{#if a}}body", {"a": True}) == "{{#if a}}body"


class TestIteration:

    def test_each_with_nested_conditional(self):
        template = "<{{#each items}}{{#if display}}{{v}}{{/if}}{{/each}}>"
        items = [
            {"display": True, "v": "a"},
            {"display": False, "v": "b"},
            {"display": True, "v": "c"},
        ]

        result = render(template, {"items": items})

        assert result == "<ac>"
        assert "b" not in result

    def test_missing_collection_removes_block(self):
        result = render("a{{#each items}}<li>BODY {{v}}</li>{{/each}}b", {})

        assert result == "ab"

    def test_item_is_independent_context(self):
        """Элемент коллекции не наследует ключи внешнего контекста."""
        template = "{{title}}:{{#each items}}[{{title}}]{{/each}}"
        context = {"title": "T", "items": [{"title": "a"}, {}]}

        assert render(template, context) == "T:[a][]"

    def test_empty_collection(self):
        assert render("[{{#each xs}}x{{/each}}]", {"xs": []}) == "[]"

    def test_sequential_blocks(self):
        template = "{{#each a}}x{{/each}}|{{#each b}}y{{/each}}"

        assert render(template, {"a": [{}], "b": [{}, {}]}) == "x|yy"

    def test_each_inside_conditional(self):
        template = "{{#if show}}{{#each xs}}{{v}}{{/each}}{{/if}}"
        context = {"show": True, "xs": [{"v": "1"}, {"v": "2"}]}

        assert render(template, context) == "12"

    def test_nested_each_not_depth_matched(self):
        """
        Вложенный #each закрывается ближайшим /each: внутренний блок
        остаётся без закрывающего тега и выводится как есть.
        """
        template = "{{#each outer}}[{{#each inner}}{{x}}{{/each}}]{{/each}}"
        context = {"outer": [{"x": "1", "inner": [{"x": "2"}]}]}

        assert render(template, context) == "[{{#each inner}}1]"

    def test_not_a_collection_left_in_place(self):
        template = "{{#each n}}<{{v}}>{{/each}}"

        assert render(template, {"n": 5, "v": "x"}) == "{{#each n}}<x>"
