# SPDX-License-Identifier: MIT

from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

_UNSET = object()


class Memo(Generic[T]):
    """Single-slot cache that recomputes only when its key changes."""

    def __init__(self) -> None:
        self._key: Any = _UNSET
        self._value: Optional[T] = None

    def get(self, key: Any, compute: Callable[[], T]) -> T:
        if self._key is not _UNSET and self._key == key:
            return self._value  # type: ignore[return-value]

        value = compute()
        self._key = key
        self._value = value
        return value
