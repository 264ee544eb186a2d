from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict

from .context_loader import load_context, parse_assignments
from .conf import ConfigCoerceError
from .engine import MiniHandlebars, read_template
from .errors import MHBUserError
from .options import DEFAULT_OPTIONS, load_options
from .template import tokenize_template
from .version import tool_version


def _setup_logging() -> None:
    root = logging.getLogger("mhb")
    if root.handlers:
        return
    level = logging.DEBUG if os.environ.get("MHB_DEBUG") else logging.WARNING
    root.setLevel(level)
    h = logging.StreamHandler()
    h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    root.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mhb",
        description="mini-handlebars: {{var}}, {{#if}}, {{#each}} templates",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp_render = sub.add_parser("render", help="Отрендерить шаблон в stdout")
    sp_render.add_argument("template", help="путь к файлу шаблона")
    sp_render.add_argument(
        "--context",
        metavar="FILE",
        help="файл контекста (YAML или JSON)",
    )
    sp_render.add_argument(
        "--set",
        action="append",
        metavar="KEY=VALUE",
        dest="assignments",
        help="значение контекста (можно указать несколько); перекрывает --context",
    )
    sp_render.add_argument(
        "--options",
        metavar="FILE",
        help="YAML-файл опций рендеринга",
    )

    sp_tokens = sub.add_parser("tokens", help="Список директив шаблона (JSON)")
    sp_tokens.add_argument("template", help="путь к файлу шаблона")

    return p


def _context(ns: argparse.Namespace) -> Dict[str, Any]:
    context: Dict[str, Any] = {}
    if ns.context:
        context.update(load_context(Path(ns.context)))
    context.update(parse_assignments(ns.assignments))
    return context


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging()

    try:
        if ns.cmd == "render":
            options = load_options(Path(ns.options)) if ns.options else DEFAULT_OPTIONS
            text = MiniHandlebars().render(ns.template, _context(ns), options)
            sys.stdout.write(text)
            return 0

        if ns.cmd == "tokens":
            directives = tokenize_template(read_template(Path(ns.template)))
            data = [
                {"raw": d.raw, "kind": d.kind.value, "name": d.name, "position": d.position}
                for d in directives
            ]
            sys.stdout.write(json.dumps(data, ensure_ascii=False, indent=2) + "\n")
            return 0

    except (MHBUserError, ConfigCoerceError) as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
