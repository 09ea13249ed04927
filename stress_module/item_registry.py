"""Central registry for item handlers.

Handlers register themselves at import time through @Item. ItemRegistry
takes a snapshot of those entries (or any explicit list of entries) into an
immutable key -> entry table that StressModule dispatches through.
"""
import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence

from .handler_wrappers import UnknownItemError
from .item_decorator import RegistryEntry, registered_entries
from .request import ItemContext, ItemRequest
from .results import ResultBase

logger = logging.getLogger(__name__)


class ItemRegistry:
    """Immutable mapping from item keys to registry entries.

    Usage:
        >>> registry = ItemRegistry.default()
        >>> [entry.key for entry in registry.list_items()][:2]
        ['stress.echo', 'stress.file']
        >>> registry.dispatch("stress.ping", [], ctx)
        UnsignedResult(kind='ui64', value=1)

    Raises:
        ValueError: At construction time, if two entries share a key.
    """

    def __init__(self, entries: Iterable[RegistryEntry]) -> None:
        table: dict[str, RegistryEntry] = {}
        for entry in entries:
            if entry.key in table:
                raise ValueError(f"Duplicate item key: {entry.key}")
            table[entry.key] = entry
        self._entries: Mapping[str, RegistryEntry] = MappingProxyType(table)

    @classmethod
    def default(cls) -> "ItemRegistry":
        """Build a registry from every item module in the items package."""
        from . import items  # noqa: F401 - importing registers the handlers

        return cls(registered_entries())

    def list_items(self) -> list[RegistryEntry]:
        return list(self._entries.values())

    def keys(self) -> list[str]:
        return list(self._entries.keys())

    def get(self, key: str) -> RegistryEntry:
        """Get entry by key. Raises UnknownItemError if not found."""
        entry = self._entries.get(key)
        if entry is None:
            raise UnknownItemError(
                "unknown item key",
                hint="Use the capability listing to see supported keys",
                key=key,
            )
        return entry

    def dispatch(
        self,
        key: str,
        params: Sequence[str],
        context: ItemContext,
        timeout: Optional[int] = 0,
    ) -> ResultBase:
        """Run the handler bound to `key` and return its result untouched."""
        try:
            entry = self.get(key)
        except UnknownItemError as e:
            logger.warning("Query for unknown item key %r", key)
            return e.to_result()

        request = ItemRequest(key=key, params=tuple(params), timeout=timeout or 0)
        logger.debug("Dispatching %s with %d parameter(s)", key, request.nparam)
        return entry.handler(request, context)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:  # pragma: no cover
        return f"ItemRegistry(items={list(self._entries.keys())})"
