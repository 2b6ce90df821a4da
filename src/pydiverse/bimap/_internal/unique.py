from __future__ import annotations

import logging
from typing import Any, Protocol

import structlog

from pydiverse.bimap._internal.errors import DuplicateValueError

# silent unless the application configures the standard library logging
logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)


class PairedView(Protocol):
    """One side of a bidirectional map, as seen by :func:`ensure_can_set`."""

    def inverse(self) -> PairedView: ...

    def has(self, key: Any) -> bool: ...

    def get(self, key: Any, default: Any = None) -> Any: ...

    def set(self, key: Any, value: Any, *, force: bool = False) -> PairedView: ...

    def delete(self, key: Any) -> bool: ...

    def binds(self, key: Any, value: Any) -> bool:
        """Whether `key` is currently bound to exactly `value`."""


def ensure_can_set(view: PairedView, key: Any, value: Any, *, force: bool) -> None:
    """
    Makes sure that ``view.set(key, value)`` keeps both keys and values unique.

    Does nothing if `value` is unbound or already bound to `key`. Otherwise `value`
    belongs to another key and, unless `force` is set, a
    :class:`DuplicateValueError` is raised before anything is modified.

    With `force`, the conflict is resolved in one of two ways:

    * `key` is bound as well, to an entry different from the one holding `value`.
      Neither entry has a better claim on its position in the insertion order, so
      both are removed and the following ``set`` appends a new entry.
    * `key` is unbound. The entry holding `value` gets `key` as its new key (in
      place, keeping its position), which turns the following ``set`` into a no-op.
    """
    inverse = view.inverse()
    if not inverse.has(value) or inverse.binds(value, key):
        return

    bound_key = inverse.get(value)
    if not force:
        raise DuplicateValueError(key, value, bound_key)

    if view.has(key):
        logger.debug(
            "evicting both conflicting entries",
            key=key,
            value=value,
            bound_key=bound_key,
        )
        view.delete(key)
        inverse.delete(value)
    else:
        logger.debug(
            "moving value to a new key", key=key, value=value, bound_key=bound_key
        )
        inverse.set(value, key)
