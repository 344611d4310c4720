"""Glob-like patterns over dotted module names.

Syntax:
    *    exactly one segment
    **   any number of segments
    ?    one character inside a segment

A trailing ".**" also matches the package itself (myapp.domain.** matches
myapp.domain) and a leading "**." also matches the bare name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ModulePattern:
    """Compiled module name pattern.

    Attributes:
        original: Pattern as written in configuration
        regex: Anchored regex equivalent
    """

    original: str
    regex: re.Pattern[str]

    def match(self, name: str) -> bool:
        """Check if dotted module name matches.

        Raises:
            TypeError: If name is None
        """
        if name is None:
            raise TypeError("name must not be None")
        return self.regex.fullmatch(name) is not None

    @classmethod
    def compile(cls, pattern: str) -> ModulePattern:
        """Translate pattern into a regex.

        Args:
            pattern: Pattern string

        Returns:
            ModulePattern

        Raises:
            ValueError: If pattern is empty or has an empty segment
        """
        if not pattern:
            raise ValueError("pattern must not be empty")

        segments = pattern.split(".")
        if any(not s for s in segments):
            raise ValueError(f"pattern '{pattern}' has an empty segment")

        return cls(original=pattern, regex=re.compile(_translate(segments)))

    def __str__(self) -> str:
        """Return original pattern."""
        return self.original


def _translate(segments: list[str]) -> str:
    """Build regex from pattern segments.

    Every segment contributes its own leading dot, so "**" can swallow
    whole segments including separators.
    """
    if segments == ["**"]:
        return r".*"

    pieces: list[str] = []
    last = len(segments) - 1

    for index, segment in enumerate(segments):
        # first segment, or the one right after a leading "**", has no dot
        glued = index == 0 or (index == 1 and segments[0] == "**")

        if segment == "**":
            if index == 0:
                # leading: zero or more segments followed by a dot
                pieces.append(r"(?:[^.]+\.)*")
                continue
            if index == last:
                pieces.append(r"(?:\..+)?")
                continue
            pieces.append(r"(?:\.[^.]+)*")
            continue

        if not glued:
            pieces.append(r"\.")
        pieces.append(_translate_segment(segment))

    return "".join(pieces)


def _translate_segment(segment: str) -> str:
    out: list[str] = []
    for char in segment:
        if char == "*":
            out.append(r"[^.]*")
        elif char == "?":
            out.append(r"[^.]")
        else:
            out.append(re.escape(char))
    body = "".join(out)
    # a lone "*" must consume a non-empty segment
    return r"[^.]+" if segment == "*" else body


def compile_patterns(patterns: tuple[str, ...]) -> tuple[ModulePattern, ...]:
    """Compile several patterns. FAIL-FIRST on the first invalid one."""
    return tuple(ModulePattern.compile(p) for p in patterns)


def matches_any(name: str, patterns: tuple[ModulePattern, ...]) -> bool:
    """Check if name matches at least one pattern."""
    return any(p.match(name) for p in patterns)
