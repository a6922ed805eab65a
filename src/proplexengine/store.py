"""Property store: the key/value mapping a load produces.

A store is created empty with Properties(), or created and populated by
the loader. Every store carries a status; only an OK store owns a mapping.
A failed store answers every query as if it were empty.

Not thread-safe. Callers sharing a store across threads must serialize
access themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, KeysView, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from proplexengine.diagnostics import ErrorTemplate, PropertiesLoadError, PropertiesStateError
from proplexengine.enums import PropertiesStatus
from proplexengine.syntax.serializer import to_debug_string

if TYPE_CHECKING:
    from proplexengine.diagnostics import Diagnostic
    from proplexengine.syntax.ast import PropertyEntry

__all__ = ["Properties"]

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, str | None] = MappingProxyType({})


class Properties:
    """Last-write-wins mapping from key to value or None.

    None is the no-value sentinel: a key loaded from a key-only line is
    present (has_key is True) but get() returns None.

    Example:
        >>> props = Properties()
        >>> props.put("k1", "v1")
        >>> props.put("k4", None)
        >>> props.get("k1"), props.get("k4"), props.has_key("k4"), props.size()
        ('v1', None, True, 2)
    """

    __slots__ = ("_diagnostic", "_map", "_released", "_status")

    def __init__(self) -> None:
        """Create an empty, usable store."""
        self._status = PropertiesStatus.OK
        self._diagnostic: Diagnostic | None = None
        self._map: dict[str, str | None] | None = {}
        self._released = False

    @classmethod
    def failed(
        cls, status: PropertiesStatus, diagnostic: Diagnostic | None = None
    ) -> Properties:
        """Create a status-bearing store with no mapping.

        Args:
            status: Error status explaining the failure (must not be OK)
            diagnostic: Details for logs and raise_for_status()

        Raises:
            ValueError: If status is OK
        """
        if status is PropertiesStatus.OK:
            msg = "A failed store requires an error status"
            raise ValueError(msg)
        store = cls()
        store._status = status
        store._diagnostic = diagnostic
        store._map = None
        return store

    @classmethod
    def from_entries(cls, entries: Iterable[PropertyEntry]) -> Properties:
        """Create a store from parsed entries, later duplicates winning."""
        store = cls()
        store.put_entries(entries)
        return store

    @property
    def status(self) -> PropertiesStatus:
        """Outcome of constructing this store."""
        return self._status

    @property
    def diagnostic(self) -> Diagnostic | None:
        """Failure details, None for an OK store."""
        return self._diagnostic

    @property
    def is_ok(self) -> bool:
        """Check if the store has a usable mapping."""
        return self._status is PropertiesStatus.OK and self._map is not None

    @property
    def is_released(self) -> bool:
        """Check if release() has dropped the mapping."""
        return self._released

    @property
    def mapping(self) -> Mapping[str, str | None] | None:
        """Read-only view of the mapping, None for a failed or released store."""
        if self._map is None:
            return None
        return MappingProxyType(self._map)

    def _entries(self) -> Mapping[str, str | None]:
        return self._map if self._map is not None else _EMPTY

    def _require_map(self) -> dict[str, str | None]:
        if self._map is None:
            raise PropertiesStateError(
                ErrorTemplate.store_not_usable(self._status, released=self._released)
            )
        return self._map

    def put(self, key: str, value: str | None) -> None:
        """Insert or overwrite a key.

        Args:
            key: Non-empty key text
            value: Value text, or None for no value

        Raises:
            TypeError: If key is not a str or value is neither str nor None
            ValueError: If key is empty
            PropertiesStateError: If the store is failed or released
        """
        if not isinstance(key, str):
            msg = f"Property key must be str, got {type(key).__name__}"
            raise TypeError(msg)
        if not key:
            msg = "Property key must be non-empty"
            raise ValueError(msg)
        if value is not None and not isinstance(value, str):
            msg = f"Property value must be str or None, got {type(value).__name__}"
            raise TypeError(msg)
        mapping = self._require_map()
        if key in mapping:
            logger.debug("Overwriting property '%s'", key)
        mapping[key] = value

    def put_entries(self, entries: Iterable[PropertyEntry]) -> int:
        """Put every parsed entry in order.

        Returns:
            Number of entries applied (duplicates included)
        """
        count = 0
        for entry in entries:
            self.put(entry.key, entry.value)
            count += 1
        return count

    def get(self, key: str) -> str | None:
        """Get a value.

        Returns:
            The value; None when the key has no value OR is absent.
            Use has_key() to tell the two apart.
        """
        return self._entries().get(key)

    def get_or_default(self, key: str, default: str | None) -> str | None:
        """Get a value, or default when the key is absent.

        A present key with no value returns None, not default.
        """
        entries = self._entries()
        if key not in entries:
            return default
        return entries[key]

    def has_key(self, key: str) -> bool:
        """Check if key is present, regardless of its value."""
        return key in self._entries()

    def size(self) -> int:
        """Number of distinct keys."""
        return len(self._entries())

    def keys(self) -> KeysView[str]:
        """Keys in first-insertion order."""
        return self._entries().keys()

    def items(self) -> Iterable[tuple[str, str | None]]:
        """(key, value) pairs in first-insertion order."""
        return self._entries().items()

    def release(self) -> None:
        """Drop every owned entry and the mapping.

        The store keeps its status but answers queries as empty afterwards.
        Releasing twice is harmless.
        """
        if self._map is not None:
            self._map.clear()
        self._map = None
        self._released = True

    def raise_for_status(self) -> None:
        """Raise if the store is not OK.

        Raises:
            PropertiesLoadError: With the store's diagnostic and status
            PropertiesStateError: If an OK store has been released
        """
        if self._status is PropertiesStatus.OK:
            self._require_map()
            return
        message = self._diagnostic if self._diagnostic is not None else self._status.description
        raise PropertiesLoadError(message, status=self._status)

    def to_debug_string(self) -> str:
        """Render entries as '[key]=[value]' lines."""
        return to_debug_string(self)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return key in self._entries()

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries())

    def __getitem__(self, key: str) -> str | None:
        """Get a value, raising KeyError when the key is absent."""
        return self._entries()[key]

    def __enter__(self) -> Properties:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Release the store. Does not suppress exceptions."""
        self.release()

    def __str__(self) -> str:
        return self.to_debug_string()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"Properties(status={self._status}, size={self.size()})"
