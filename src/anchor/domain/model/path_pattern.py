"""Glob patterns over source file paths.

Paths are posix paths relative to the source root.

Syntax:
    *    any characters inside one directory level
    ?    one character inside one directory level
    **   zero or more directory levels (recursive patterns only)

myapp/domain/**/*.py matches myapp/domain/user.py and
myapp/domain/sub/deep.py; myapp/domain/*.py matches only the former.
A non-recursive pattern reads "**" like "*".
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_RECURSIVE = "**"


@dataclass(frozen=True, slots=True)
class PathPattern:
    """Compiled file path pattern.

    Attributes:
        original: Pattern as written in configuration
        recursive: Whether "**" spans directory levels
        regex: Anchored regex equivalent
    """

    original: str
    recursive: bool
    regex: re.Pattern[str]

    def match(self, path: str) -> bool:
        """Check if relative posix path matches.

        Raises:
            TypeError: If path is None
        """
        if path is None:
            raise TypeError("path must not be None")
        return self.regex.fullmatch(path) is not None

    @classmethod
    def compile(cls, pattern: str, *, recursive: bool = True) -> PathPattern:
        """Translate pattern into a regex.

        Args:
            pattern: Pattern string
            recursive: Let "**" match zero or more directory levels

        Returns:
            PathPattern

        Raises:
            ValueError: If pattern is empty or absolute
        """
        if not pattern:
            raise ValueError("path pattern must not be empty")
        if pattern.startswith("/"):
            raise ValueError(f"path pattern '{pattern}' must be relative to the source root")

        regex = _translate(pattern.split("/"), recursive=recursive)
        return cls(original=pattern, recursive=recursive, regex=re.compile(regex))

    def __str__(self) -> str:
        """Return original pattern."""
        return self.original


def _translate(segments: list[str], *, recursive: bool) -> str:
    pieces: list[str] = []
    last = len(segments) - 1

    for index, segment in enumerate(segments):
        if recursive and segment == _RECURSIVE:
            # trailing "**" takes everything below, otherwise whole directories
            pieces.append(r".*" if index == last else r"(?:[^/]+/)*")
            continue

        pieces.append(_translate_segment(segment))
        if index != last:
            pieces.append("/")

    return "".join(pieces)


def _translate_segment(segment: str) -> str:
    out: list[str] = []
    for char in segment:
        if char == "*":
            # "**" inside a segment collapses to one "*"
            if not out or out[-1] != r"[^/]*":
                out.append(r"[^/]*")
        elif char == "?":
            out.append(r"[^/]")
        else:
            out.append(re.escape(char))
    return "".join(out)


def compile_path_patterns(
    patterns: tuple[str, ...],
    *,
    recursive: bool = True,
) -> tuple[PathPattern, ...]:
    """Compile several patterns. FAIL-FIRST on the first invalid one."""
    return tuple(PathPattern.compile(p, recursive=recursive) for p in patterns)
