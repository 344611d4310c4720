"""Tests for infrastructure/adapters/ast_parser.py."""

from pathlib import Path

import pytest

from anchor.domain.exceptions.parsing import ParsingError
from anchor.infrastructure.adapters.ast_parser import ASTSourceParser
from tests.factories import mid, mids, write_tree


class TestASTSourceParserInit:
    """Tests for parser construction."""

    def test_none_root_raises(self) -> None:
        with pytest.raises(TypeError, match="root_path must not be None"):
            ASTSourceParser(None)  # type: ignore[arg-type]

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="must be a directory"):
            ASTSourceParser(tmp_path / "missing")

    def test_root_path(self, tmp_path: Path) -> None:
        assert ASTSourceParser(tmp_path).root_path == tmp_path


class TestDiscoverSources:
    """Tests for source discovery."""

    def test_sorted_and_filtered(self, tmp_path: Path) -> None:
        write_tree(
            tmp_path,
            {
                "pkg/b.py": "",
                "pkg/a.py": "",
                "pkg/notes.txt": "",
                "pkg/__pycache__/a.py": "",
                ".venv/lib/x.py": "",
            },
        )
        sources = ASTSourceParser(tmp_path).discover_sources()
        assert sources == (tmp_path / "pkg" / "a.py", tmp_path / "pkg" / "b.py")

    def test_custom_exclude(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"pkg/a.py": "", "pkg/migrations/m1.py": ""})
        parser = ASTSourceParser(tmp_path, exclude=frozenset({"migrations"}))
        assert parser.discover_sources() == (tmp_path / "pkg" / "a.py",)


class TestParseFile:
    """Tests for single file parsing."""

    def test_record(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"pkg/a.py": "import os\n"})
        record = ASTSourceParser(tmp_path).parse_file(tmp_path / "pkg" / "a.py")
        assert record.owner == mid("pkg.a")
        assert record.direct_dependencies == mids("os")
        assert record.path == tmp_path / "pkg" / "a.py"

    def test_syntax_error_raises(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"bad.py": "def broken(:\n"})
        with pytest.raises(ParsingError) as exc_info:
            ASTSourceParser(tmp_path).parse_file(tmp_path / "bad.py")
        assert exc_info.value.path == tmp_path / "bad.py"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ParsingError):
            ASTSourceParser(tmp_path).parse_file(tmp_path / "gone.py")

    def test_non_importable_file(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"run-me.py": "import os\n"})
        record = ASTSourceParser(tmp_path).parse_file(tmp_path / "run-me.py")
        assert record.owner is None
        assert record.direct_dependencies == mids("os")

    def test_ignore_type_checking(self, tmp_path: Path) -> None:
        write_tree(
            tmp_path,
            {"m.py": "from typing import TYPE_CHECKING\nif TYPE_CHECKING:\n    import x\n"},
        )
        parser = ASTSourceParser(tmp_path, ignore_type_checking=True)
        assert parser.parse_file(tmp_path / "m.py").direct_dependencies == mids("typing")


class TestParseDirectory:
    """Tests for whole-tree parsing."""

    def test_one_record_per_file(self, tmp_path: Path) -> None:
        write_tree(
            tmp_path,
            {
                "pkg/__init__.py": "",
                "pkg/a.py": "from pkg import b\n",
                "pkg/b.py": "import os\n",
            },
        )
        records = ASTSourceParser(tmp_path).parse_directory()
        by_owner = {r.owner: r for r in records}

        assert set(by_owner) == mids("pkg", "pkg.a", "pkg.b")
        # pkg.b resolved as a submodule because it is part of the source set
        assert by_owner[mid("pkg.a")].direct_dependencies == mids("pkg", "pkg.b")

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert ASTSourceParser(tmp_path).parse_directory() == ()

    def test_syntax_error_propagates(self, tmp_path: Path) -> None:
        write_tree(tmp_path, {"ok.py": "", "bad.py": "class\n"})
        with pytest.raises(ParsingError):
            ASTSourceParser(tmp_path).parse_directory()
