#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

import ast
from collections.abc import Iterator
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/operation_responses"
FRAMEWORK_MODULES = ("fastapi", "starlette")


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _is_type_checking_block(node: ast.stmt) -> bool:
    if not isinstance(node, ast.If):
        return False
    test = node.test
    if isinstance(test, ast.Attribute):
        return test.attr == "TYPE_CHECKING"
    return isinstance(test, ast.Name) and test.id == "TYPE_CHECKING"


def _runtime_imports(tree: ast.Module) -> Iterator[str]:
    """Yield imported module names, skipping ``if TYPE_CHECKING:`` bodies."""
    for statement in tree.body:
        if _is_type_checking_block(statement):
            for node in statement.orelse:
                yield from _runtime_imports(ast.Module(body=[node], type_ignores=[]))
            continue
        for node in ast.walk(statement):
            if isinstance(node, ast.Import):
                yield from (alias.name for alias in node.names)
            elif isinstance(node, ast.ImportFrom) and node.module and not node.level:
                yield node.module


def banned_imports(path: Path, banned: tuple[str, ...]) -> list[str]:
    """Return runtime imports in ``path`` that fall under a banned package."""
    tree = ast.parse(_read(path), filename=str(path))
    return [
        module
        for module in _runtime_imports(tree)
        if any(module == name or module.startswith(f"{name}.") for name in banned)
    ]


def main() -> None:
    """Keep web-framework imports inside the transport package."""
    for path in PACKAGE.glob("*.py"):
        found = banned_imports(path, FRAMEWORK_MODULES)
        if found:
            raise SystemExit(f"Architecture violation in {path}: imports {found}")

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
