from __future__ import annotations

import ast
from collections.abc import Iterator
from pathlib import Path

PKG_ROOT = Path(__file__).resolve().parents[1]


def _sources() -> Iterator[tuple[Path, ast.Module]]:
    for path in sorted(PKG_ROOT.rglob("*.py")):
        rel = path.relative_to(PKG_ROOT)
        if any(part.startswith(".") or part == "__pycache__" for part in rel.parts):
            continue
        yield rel, ast.parse(path.read_text(encoding="utf-8"), filename=str(rel))


def _typing_any_uses(tree: ast.Module) -> list[int]:
    aliases: set[str] = set()
    lines: list[int] = []
    for node in ast.walk(tree):
        match node:
            case ast.Import(names=names):
                aliases.update(a.asname or "typing" for a in names if a.name == "typing")
            case ast.ImportFrom(module="typing", names=names) if any(a.name == "Any" for a in names):
                lines.append(node.lineno)
            case _:
                pass
    for node in ast.walk(tree):
        if (
            isinstance(node, ast.Attribute)
            and node.attr == "Any"
            and isinstance(node.value, ast.Name)
            and node.value.id in aliases
        ):
            lines.append(node.lineno)
    return lines


def test_no_typing_any_in_gitinstall() -> None:
    """`Any` disables type checking and tends to spread; boundaries use Protocols instead."""
    offenders = [
        f"{rel}:{line}" for rel, tree in _sources() for line in _typing_any_uses(tree)
    ]
    assert not offenders, "Explicit typing.Any is forbidden:\n" + "\n".join(offenders)


def test_no_bare_except_in_gitinstall() -> None:
    offenders = [
        f"{rel}:{node.lineno}"
        for rel, tree in _sources()
        for node in ast.walk(tree)
        if isinstance(node, ast.ExceptHandler) and node.type is None
    ]
    assert not offenders, "Bare except clauses are forbidden:\n" + "\n".join(offenders)
