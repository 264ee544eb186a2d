import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent


def write(p: Path, text: str) -> Path:
    """Записывает текст в файл, создавая родительские директории при необходимости."""
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


def _run_cli(cwd: Path, *args: str) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "mhb.cli", *args],
        cwd=cwd, env=env, capture_output=True, text=True, encoding="utf-8"
    )


@pytest.fixture
def run_cli():
    return _run_cli


@pytest.fixture
def write_file():
    return write


@pytest.fixture
def tmpproj(tmp_path: Path):
    """Минимальный проект: шаблон страницы и контекст к нему."""
    write(
        tmp_path / "page.html",
        '<a href="{{link}}">{{name}}</a>\n'
        "{{#if visible}}<p>{{note}}</p>{{/if}}\n"
        "<ul>{{#each items}}<li>{{title}}</li>{{/each}}</ul>\n",
    )
    write(
        tmp_path / "context.yaml",
        "link: https://x.com\n"
        "name: X\n"
        "visible: true\n"
        "note: hi\n"
        "items:\n"
        "  - title: one\n"
        "  - title: two\n",
    )
    return tmp_path
