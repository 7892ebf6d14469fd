"""Tests that every package module compiles on the running interpreter."""

from pathlib import Path

import pytest

import flyer_studio

PACKAGE_DIR = Path(flyer_studio.__file__).parent
MODULES = sorted(PACKAGE_DIR.rglob("*.py"))


@pytest.mark.parametrize("path", MODULES, ids=lambda p: str(p.relative_to(PACKAGE_DIR)))
def test_module_compiles(path):
    compile(path.read_text(encoding="utf-8"), str(path), "exec")
