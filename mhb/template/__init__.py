"""
Движок шаблонизации mini-handlebars.

Поддерживает подстановку переменных {{name}}, условные блоки
{{#if cond}}...{{/if}} и итерацию {{#each items}}...{{/each}}.
"""

from __future__ import annotations

from .lexer import DirectiveLexer, tokenize_template
from .processor import TemplateProcessor, render
from .tokens import Directive, DirectiveKind

__all__ = [
    "Directive",
    "DirectiveKind",
    "DirectiveLexer",
    "TemplateProcessor",
    "render",
    "tokenize_template",
]
