"""Generic union-merge for mappings."""
from __future__ import annotations

from typing import Callable, Mapping, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def _keep_primary(_secondary_value: V, primary_value: V) -> V:
    return primary_value


def merge_reduce(
    primary: Optional[Mapping[K, V]],
    secondary: Optional[Mapping[K, V]],
    reduce: Optional[Callable[[V, V], V]] = None,
) -> Optional[Mapping[K, V]]:
    """Union ``primary`` and ``secondary`` into a new dict.

    Keys present in both are replaced by ``reduce(secondary[k], primary[k])``;
    the default keeps the primary value. Primary keys keep their order and
    secondary-only keys are appended in secondary's order. When ``secondary``
    is ``None`` the primary mapping is returned as-is; a ``None`` primary is
    treated as empty.
    """
    if secondary is None:
        return primary
    reducer = reduce or _keep_primary

    result: dict[K, V] = dict(primary) if primary is not None else {}
    for key, value in secondary.items():
        if key in result:
            result[key] = reducer(value, result[key])
        else:
            result[key] = value
    return result


__all__ = ["merge_reduce"]
