"""Tests for infrastructure/analyzers/base.py."""

import ast
from pathlib import Path

import pytest

from anchor.domain.exceptions.parsing import ParsingError
from anchor.infrastructure.analyzers.base import (
    DEFAULT_TYPE_CHECKING_NAMES,
    dotted_chain,
    is_package_file,
    is_type_checking_guard,
    module_id_for,
    resolve_relative_import,
    type_checking_names,
)
from tests.factories import mid

ROOT = Path("/project/src")


class TestModuleIdFor:
    """Tests for module_id_for."""

    def test_module(self) -> None:
        assert module_id_for(ROOT / "app" / "utils.py", ROOT) == mid("app.utils")

    def test_package(self) -> None:
        assert module_id_for(ROOT / "app" / "__init__.py", ROOT) == mid("app")

    def test_top_level_module(self) -> None:
        assert module_id_for(ROOT / "setup_helpers.py", ROOT) == mid("setup_helpers")

    def test_root_init_has_no_module(self) -> None:
        assert module_id_for(ROOT / "__init__.py", ROOT) is None

    def test_non_identifier_has_no_module(self) -> None:
        assert module_id_for(ROOT / "scripts" / "run-me.py", ROOT) is None

    def test_outside_root_raises(self) -> None:
        with pytest.raises(ParsingError, match="not under"):
            module_id_for(Path("/elsewhere/a.py"), ROOT)


class TestIsPackageFile:
    """Tests for is_package_file."""

    def test_init(self) -> None:
        assert is_package_file(Path("a/__init__.py"))

    def test_module(self) -> None:
        assert not is_package_file(Path("a/b.py"))


class TestResolveRelativeImport:
    """Tests for resolve_relative_import."""

    def test_absolute(self) -> None:
        assert resolve_relative_import("os.path", 0, mid("a.b")) == mid("os.path")

    def test_absolute_without_module_raises(self) -> None:
        with pytest.raises(ValueError, match="must have module"):
            resolve_relative_import(None, 0, mid("a.b"))

    def test_sibling(self) -> None:
        assert resolve_relative_import("c", 1, mid("a.b")) == mid("a.c")

    def test_current_package(self) -> None:
        assert resolve_relative_import(None, 1, mid("a.b")) == mid("a")

    def test_parent_package(self) -> None:
        assert resolve_relative_import("x", 2, mid("a.b.c")) == mid("a.x")

    def test_from_package_init(self) -> None:
        assert resolve_relative_import("c", 1, mid("a.b"), is_package=True) == mid("a.b.c")

    def test_escape_raises(self) -> None:
        with pytest.raises(ValueError, match="escapes package"):
            resolve_relative_import("x", 1, mid("toplevel"))

    def test_escape_from_package_raises(self) -> None:
        with pytest.raises(ValueError, match="escapes package"):
            resolve_relative_import("x", 2, mid("a"), is_package=True)


class TestDottedChain:
    """Tests for dotted_chain."""

    def _expr(self, source: str) -> ast.expr:
        stmt = ast.parse(source).body[0]
        assert isinstance(stmt, ast.Expr)
        return stmt.value

    def test_name(self) -> None:
        assert dotted_chain(self._expr("a")) == ("a",)

    def test_attribute_chain(self) -> None:
        assert dotted_chain(self._expr("a.b.c")) == ("a", "b", "c")

    def test_call_root(self) -> None:
        assert dotted_chain(self._expr("a().b")) is None


class TestIsTypeCheckingGuard:
    """Tests for is_type_checking_guard."""

    def _if(self, source: str) -> ast.If:
        stmt = ast.parse(source).body[0]
        assert isinstance(stmt, ast.If)
        return stmt

    def test_bare_name(self) -> None:
        assert is_type_checking_guard(self._if("if TYPE_CHECKING:\n    pass"))

    def test_typing_attribute(self) -> None:
        assert is_type_checking_guard(self._if("if typing.TYPE_CHECKING:\n    pass"))

    def test_other_condition(self) -> None:
        assert not is_type_checking_guard(self._if("if DEBUG:\n    pass"))

    def test_and_condition(self) -> None:
        assert is_type_checking_guard(self._if("if DEBUG and TYPE_CHECKING:\n    pass"))

    def test_or_condition(self) -> None:
        assert not is_type_checking_guard(self._if("if DEBUG or TYPE_CHECKING:\n    pass"))

    def test_alias_needs_names(self) -> None:
        node = self._if("if t.TYPE_CHECKING:\n    pass")
        assert not is_type_checking_guard(node)
        assert is_type_checking_guard(node, frozenset({"t.TYPE_CHECKING"}))


class TestTypeCheckingNames:
    """Tests for type_checking_names."""

    def test_defaults(self) -> None:
        assert type_checking_names(ast.parse("")) == DEFAULT_TYPE_CHECKING_NAMES

    def test_module_alias(self) -> None:
        names = type_checking_names(ast.parse("import typing as t\n"))
        assert "t.TYPE_CHECKING" in names

    def test_name_alias(self) -> None:
        names = type_checking_names(ast.parse("from typing import TYPE_CHECKING as TC\n"))
        assert "TC" in names

    def test_typing_extensions(self) -> None:
        names = type_checking_names(ast.parse("import typing_extensions as te\n"))
        assert "te.TYPE_CHECKING" in names

    def test_other_module_ignored(self) -> None:
        names = type_checking_names(ast.parse("import settings as t\n"))
        assert names == DEFAULT_TYPE_CHECKING_NAMES
