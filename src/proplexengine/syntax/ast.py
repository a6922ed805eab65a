"""Parse result node for .properties sources.

Python 3.12+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["PropertyEntry"]


@dataclass(frozen=True, slots=True)
class PropertyEntry:
    """One decoded key/value record in source order.

    Duplicates are NOT resolved here; a parse of a file that repeats a key
    yields one PropertyEntry per occurrence. The store applies last-write-wins.

    Attributes:
        key: Key text (escape sequences kept literally)
        value: Decoded value, or None for a key-only line
        line: 1-based physical line where the entry started
    """

    key: str
    value: str | None
    line: int

    def __post_init__(self) -> None:
        """Validate entry invariants."""
        if not self.key:
            msg = "PropertyEntry.key must be non-empty"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"PropertyEntry.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
