"""Base utilities for AST analyzers."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from anchor.domain.exceptions.parsing import ParsingError
from anchor.domain.model.module_id import ModuleID

if TYPE_CHECKING:
    from pathlib import Path


def module_id_for(file_path: Path, root_path: Path) -> ModuleID | None:
    """Compute module declared by a source file.

    Examples:
        src/app/utils.py, src → app.utils
        src/app/__init__.py, src → app
        src/scripts/run-me.py, src → None (not importable)

    Args:
        file_path: Path to .py file
        root_path: Source root (directory holding top-level packages)

    Returns:
        ModuleID, or None if the file declares no importable module

    Raises:
        ParsingError: If file is not under root (FAIL-FIRST)
    """
    try:
        relative = file_path.relative_to(root_path)
    except ValueError as e:
        raise ParsingError(file_path, f"not under {root_path}") from e

    parts = list(relative.with_suffix("").parts)

    if parts and parts[-1] == "__init__":
        parts = parts[:-1]

    if not parts or not all(part.isidentifier() for part in parts):
        return None

    return ModuleID(tuple(parts))


def is_package_file(file_path: Path) -> bool:
    """Check if file is a package's __init__.py."""
    return file_path.name == "__init__.py"


def resolve_relative_import(
    node_module: str | None,
    node_level: int,
    owner: ModuleID,
    *,
    is_package: bool = False,
) -> ModuleID:
    """Resolve import target to absolute module.

    Args:
        node_module: Module part of import (after dots)
        node_level: Number of dots (0=absolute, 1=., 2=..)
        owner: Module containing the import
        is_package: Owner is a package (__init__.py), so "." is the owner itself

    Returns:
        Absolute module id

    Raises:
        ValueError: If relative import escapes the top-level package (FAIL-FIRST)
    """
    if node_level == 0:
        if not node_module:
            raise ValueError("absolute import must have module")
        return ModuleID.parse(node_module)

    package = owner.parts if is_package else owner.parts[:-1]
    up = node_level - 1

    if up >= len(package):
        raise ValueError(f"relative import level {node_level} escapes package of '{owner}'")

    base = package[: len(package) - up]
    if node_module:
        return ModuleID((*base, *node_module.split(".")))
    return ModuleID(base)


def dotted_chain(node: ast.expr) -> tuple[str, ...] | None:
    """Flatten a Name/Attribute chain.

    Examples:
        a.b.c → ("a", "b", "c")
        a().b → None (root is not a name)

    Returns:
        Segments from root name outwards, None if the root is not a Name
    """
    attrs: list[str] = []
    current = node
    while isinstance(current, ast.Attribute):
        attrs.append(current.attr)
        current = current.value

    if not isinstance(current, ast.Name):
        return None

    return (current.id, *reversed(attrs))


_TYPING_MODULES = frozenset({"typing", "typing_extensions"})
_TYPE_CHECKING = "TYPE_CHECKING"

# spellings recognized without any typing import in the file
DEFAULT_TYPE_CHECKING_NAMES = frozenset({_TYPE_CHECKING, f"typing.{_TYPE_CHECKING}"})


def type_checking_names(tree: ast.Module) -> frozenset[str]:
    """Collect the dotted spellings of TYPE_CHECKING bound in a module.

    Examples:
        import typing as t                         → t.TYPE_CHECKING
        from typing import TYPE_CHECKING as TC     → TC
        import typing_extensions                   → typing_extensions.TYPE_CHECKING

    Returns:
        Spellings, including DEFAULT_TYPE_CHECKING_NAMES
    """
    names = set(DEFAULT_TYPE_CHECKING_NAMES)
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                if alias.name in _TYPING_MODULES:
                    names.add(f"{alias.asname or alias.name}.{_TYPE_CHECKING}")
        elif isinstance(node, ast.ImportFrom) and node.level == 0:
            if node.module not in _TYPING_MODULES:
                continue
            for alias in node.names:
                if alias.name == _TYPE_CHECKING:
                    names.add(alias.asname or alias.name)
    return frozenset(names)


def is_type_checking_guard(
    node: ast.If,
    names: frozenset[str] = DEFAULT_TYPE_CHECKING_NAMES,
) -> bool:
    """Check if if-statement body only runs under a type checker.

    True for `if TYPE_CHECKING:` and for an `and` with a TYPE_CHECKING
    operand (`if TYPE_CHECKING and sys.version_info < (3, 11):`).

    Args:
        node: If statement
        names: Spellings of TYPE_CHECKING, see type_checking_names
    """
    match node.test:
        case ast.BoolOp(op=ast.And(), values=values):
            return any(_is_type_checking(value, names) for value in values)
        case test:
            return _is_type_checking(test, names)


def _is_type_checking(expr: ast.expr, names: frozenset[str]) -> bool:
    chain = dotted_chain(expr)
    return chain is not None and ".".join(chain) in names
