import collections.abc
import logging
import types
from typing import Any, Dict, Generic, Iterator, Optional, TypeVar

from randmap.debug import trace
from randmap.errors import HandleSpaceExhausted
from randmap.handle import Handle, HandleGenerator

logger = logging.getLogger(__name__)

V = TypeVar('V')

# A collision needs two equal 64-bit draws; running out of attempts means the
# generator is broken, not that the map is full.
MAX_INSERT_ATTEMPTS = 64


class RandMap(collections.abc.Mapping, Generic[V]):
    """
    A map that creates a random handle on insertion to use when retrieving.

    Use it when you want to store something without having a key for it, keep
    equal values as separate entries, and get back a stable handle that stays
    valid until the entry is removed.

    The map reads like any other `Mapping` keyed by `Handle`. Entries are added
    with `insert`, which picks the handle, and dropped with `remove`. Subscript
    lookup raises `KeyError` as usual; `get` and `remove` return a default
    instead, since a stale handle is an ordinary outcome.

    Not thread-safe: wrap the whole map in a lock if several threads mutate it.
    """

    __slots__ = ('_storage', '_generator')

    def __init__(self, generator: Optional[HandleGenerator] = None):
        self._storage: Dict[Handle, V] = {}
        self._generator = generator if generator is not None else HandleGenerator()

    @trace
    def insert(self, value: V) -> Handle:
        """Store `value` under a fresh handle and return the handle."""
        for _ in range(MAX_INSERT_ATTEMPTS):
            handle = self._generator.generate()
            if handle not in self._storage:
                self._storage[handle] = value
                return handle
            logger.debug("Handle collision on %r, drawing again", handle)
        raise HandleSpaceExhausted(
            f"No free handle found after {MAX_INSERT_ATTEMPTS} attempts "
            f"with {len(self._storage)} entries")

    def insert_key_value(self, handle: Handle, value: V) -> None:
        """
        Store `value` under a handle chosen by the caller, e.g. one restored
        from an earlier session. An existing entry under `handle` is replaced.
        """
        if not isinstance(handle, Handle):
            raise TypeError(f"Expected Handle, got {type(handle).__name__}")
        self._storage[handle] = value

    def get(self, handle: Handle, default: Any = None) -> Optional[V]:
        return self._storage.get(handle, default)

    def update_value(self, handle: Handle, value: V) -> bool:
        """Replace the value under a live handle. Returns False if `handle` is absent."""
        if handle not in self._storage:
            return False
        self._storage[handle] = value
        return True

    @trace
    def remove(self, handle: Handle, default: Any = None) -> Optional[V]:
        """Remove the entry and hand its value back, or return `default` if absent."""
        try:
            return self._storage.pop(handle)
        except KeyError:
            logger.debug("Remove of absent handle %r", handle)
            return default

    def clear(self) -> None:
        self._storage.clear()

    def is_empty(self) -> bool:
        return not self._storage

    def as_mapping(self) -> collections.abc.Mapping[Handle, V]:
        """
        Read-only view of the underlying storage.

        The view is live: it reflects later inserts and removals, but offers no
        way to change the map itself.
        """
        return types.MappingProxyType(self._storage)

    def copy(self) -> 'RandMap[V]':
        """Shallow copy sharing the generator, so both maps keep drawing from one stream."""
        result = self.__class__(self._generator)
        result._storage = dict(self._storage)
        return result

    def __getitem__(self, handle: Handle) -> V:
        return self._storage[handle]

    def __contains__(self, handle) -> bool:
        return handle in self._storage

    def __iter__(self) -> Iterator[Handle]:
        return iter(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    def keys(self):
        return self._storage.keys()

    def values(self):
        return self._storage.values()

    def items(self):
        return self._storage.items()

    def __eq__(self, other):
        if not isinstance(other, RandMap):
            return NotImplemented
        if len(self) != len(other):
            return False
        missing = object()
        return all(other._storage.get(handle, missing) == value
                   for handle, value in self._storage.items())

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        items_str = ', '.join(f'{k!r}: {v!r}' for k, v in self._storage.items())
        return f'{self.__class__.__name__}({{{items_str}}})'
