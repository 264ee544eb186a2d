from pathlib import Path

import pytest

from mhb.engine import MiniHandlebars
from mhb.errors import MHBUserError, TemplateReadError
from mhb.options import RenderOptions


def test_file_extension():
    assert MiniHandlebars.file_extension == "html"


def test_render_file(tmpproj: Path):
    engine = MiniHandlebars()
    context = {"link": "https://x.com", "name": "X", "visible": True, "note": "hi", "items": [{"title": "one"}]}

    result = engine.render(tmpproj / "page.html", context)

    assert result == (
        '<a href="https://x.com">X</a>\n'
        "<p>hi</p>\n"
        "<ul><li>one</li></ul>\n"
    )


def test_render_file_accepts_str_path_and_options(tmpproj: Path):
    engine = MiniHandlebars()

    result = engine.render(str(tmpproj / "page.html"), {}, RenderOptions())

    assert result == '<a href=""></a>\n\n<ul></ul>\n'


def test_render_string():
    assert MiniHandlebars.render_string("Hi {{who}}", {"who": "there"}) == "Hi there"


def test_missing_file(tmp_path: Path):
    with pytest.raises(TemplateReadError) as exc_info:
        MiniHandlebars().render(tmp_path / "absent.html", {})

    assert isinstance(exc_info.value, MHBUserError)
    assert exc_info.value.path == tmp_path / "absent.html"
    assert "absent.html" in str(exc_info.value)


def test_undecodable_file(tmp_path: Path):
    path = tmp_path / "binary.html"
    path.write_bytes(b"\xff\xfe{{a}}\x80")

    with pytest.raises(TemplateReadError) as exc_info:
        MiniHandlebars().render(path, {"a": 1})

    assert isinstance(exc_info.value.cause, UnicodeDecodeError)
