"""Deep immutability for configuration tables."""

# Module responsibilities:
# - Convert nested dict/list/set payloads into read-only equivalents.
# - Reject every later write with MutationRejected.
# - Survive shared and cyclic sub-objects by tracking what was already visited.

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Dict, Iterator, Optional

from .errors import MutationRejected


class _ReadOnly:
    __slots__ = ()

    def _reject(self, *_: object, **__: object) -> None:
        raise MutationRejected(f"{type(self).__name__} is read-only")

    def __setattr__(self, name: str, value: object) -> None:
        self._reject()

    def __delattr__(self, name: str) -> None:
        self._reject()

    __setitem__ = _reject
    __delitem__ = _reject

    # Immutable, so copies share the instance; this also keeps cyclic graphs copyable.
    def __copy__(self) -> "_ReadOnly":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "_ReadOnly":
        return self


class FrozenMapping(_ReadOnly, Mapping):
    """Read-only mapping produced by :func:`freeze_deep`."""

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[Any, Any]] = None) -> None:
        object.__setattr__(self, "_data", dict(data or {}))

    def __getitem__(self, key: Any) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrozenMapping({self._data!r})"

    def __reduce__(self):
        return (type(self), (dict(self._data),))

    update = pop = popitem = clear = setdefault = _ReadOnly._reject


class FrozenSequence(_ReadOnly, Sequence):
    """Read-only list replacement produced by :func:`freeze_deep`."""

    __slots__ = ("_items",)

    def __init__(self, items: Optional[Sequence[Any]] = None) -> None:
        object.__setattr__(self, "_items", list(items or ()))

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (FrozenSequence, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FrozenSequence({self._items!r})"

    def __reduce__(self):
        return (type(self), (list(self._items),))

    append = extend = insert = remove = pop = clear = sort = reverse = _ReadOnly._reject


def freeze_deep(value: Any, _memo: Optional[Dict[int, Any]] = None) -> Any:
    """Return a deeply immutable version of ``value``.

    Mappings become :class:`FrozenMapping`, lists become :class:`FrozenSequence`,
    sets become ``frozenset`` and tuples are rebuilt from frozen members.
    Scalars and already-frozen containers are returned unchanged. The source
    containers are not modified.

    Each container is frozen once; a container reached again (shared or
    cyclic) resolves to the same frozen object, so cycles are kept rather
    than recursed into forever.
    """

    if isinstance(value, (FrozenMapping, FrozenSequence)):
        return value

    memo = {} if _memo is None else _memo
    key = id(value)
    if key in memo:
        return memo[key]

    if isinstance(value, Mapping):
        frozen_map = FrozenMapping()
        memo[key] = frozen_map
        for item_key, item_value in value.items():
            frozen_map._data[item_key] = freeze_deep(item_value, memo)
        return frozen_map

    if isinstance(value, list):
        frozen_seq = FrozenSequence()
        memo[key] = frozen_seq
        frozen_seq._items.extend(freeze_deep(item, memo) for item in value)
        return frozen_seq

    if isinstance(value, tuple):
        items = [freeze_deep(item, memo) for item in value]
        if hasattr(value, "_fields"):
            return type(value)._make(items)
        return tuple(items)

    if isinstance(value, (set, frozenset)):
        return frozenset(freeze_deep(item, memo) for item in value)

    return value


def is_frozen(value: Any) -> bool:
    """Return True when ``value`` holds no mutable container at any depth."""

    return _is_frozen(value, set())


def _is_frozen(value: Any, seen: set) -> bool:
    if id(value) in seen:
        return True
    if isinstance(value, FrozenMapping):
        seen.add(id(value))
        return all(_is_frozen(item, seen) for item in value.values())
    if isinstance(value, (FrozenSequence, tuple, frozenset)):
        seen.add(id(value))
        return all(_is_frozen(item, seen) for item in value)
    return not isinstance(value, (Mapping, list, set, bytearray))
