"""Package modules import each other at module level only.

Source modules refer to siblings through dotted names
(``nullability_policy.core.options.build_options``). Importing a package
module inside a function rebinds ``nullability_policy`` locally for the whole
function body, so any earlier dotted reference there fails at call time.
"""

import ast
from pathlib import Path

import pytest


PACKAGE = "nullability_policy"
SOURCE_ROOT = Path(__file__).resolve().parent.parent / "src" / PACKAGE


def _source_files() -> list[Path]:
    return sorted(SOURCE_ROOT.rglob("*.py"))


def _imported_modules(node: ast.AST) -> list[str]:
    if isinstance(node, ast.Import):
        return [alias.name for alias in node.names]
    if isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
        return [node.module]
    return []


def _nested_package_imports(path: Path) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    top_level = {id(node) for node in tree.body}
    return [
        f"{path.relative_to(SOURCE_ROOT)}:{node.lineno} {module}"
        for node in ast.walk(tree)
        if id(node) not in top_level
        for module in _imported_modules(node)
        if module == PACKAGE or module.startswith(PACKAGE + ".")
    ]


def test_source_modules_are_discovered():
    names = {path.name for path in _source_files()}
    assert {"classifier.py", "options.py", "cli.py"} <= names


@pytest.mark.parametrize("path", _source_files(), ids=lambda p: str(p.relative_to(SOURCE_ROOT)))
def test_package_imports_are_module_level(path):
    nested = _nested_package_imports(path)
    assert nested == [], "move these imports to module level:\n" + "\n".join(nested)
