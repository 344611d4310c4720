"""Module identifier value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class ModuleID:
    """Fully qualified module name as ordered dotted-path segments.

    Equality, hashing and ordering are structural over the segments.

    Attributes:
        parts: Name segments ("myapp", "domain", "user")
    """

    parts: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.parts, tuple):
            raise TypeError(f"parts must be tuple, got {type(self.parts).__name__}")
        if not self.parts:
            raise ValueError("module id must have at least one segment")
        for part in self.parts:
            if not part or "." in part:
                raise ValueError(f"invalid module segment {part!r} in {self.parts}")

    @classmethod
    def parse(cls, dotted: str) -> ModuleID:
        """Create from dotted name.

        Args:
            dotted: Module name like "myapp.domain.user"

        Returns:
            ModuleID with one segment per dotted component

        Raises:
            ValueError: If name is empty or has empty segments
        """
        if not dotted:
            raise ValueError("module name must not be empty")
        return cls(tuple(dotted.split(".")))

    @property
    def name(self) -> str:
        """Dotted module name."""
        return ".".join(self.parts)

    @property
    def parent(self) -> ModuleID | None:
        """Enclosing package, None for top-level modules."""
        if len(self.parts) == 1:
            return None
        return ModuleID(self.parts[:-1])

    def child(self, segment: str) -> ModuleID:
        """Module nested directly inside this one."""
        return ModuleID((*self.parts, segment))

    def is_within(self, other: ModuleID) -> bool:
        """Check if this module equals other or is nested inside it.

        Examples:
            myapp.domain.user within myapp.domain → True
            myapp.domain within myapp.domain → True
            myapp.domainx within myapp.domain → False
        """
        return self.parts[: len(other.parts)] == other.parts

    def __str__(self) -> str:
        """Format as dotted name."""
        return self.name
