"""Index read resolution for the value core."""

from __future__ import annotations

import logging

from .core import Any, null
from .model import Kind

logger = logging.getLogger(__name__)


def index_get(value: Any, key: object) -> Any:
    """Resolve ``value[key]``.

    - Array: *key* is coerced to an integer position (0-based)
    - Map: *key* is looked up by value equality
    - anything else, or a miss: returns null

    The stored value itself is returned, so nested containers can be
    mutated through it.
    """
    key = key if isinstance(key, Any) else Any(key)

    if value.kind is Kind.ARRAY:
        items = value.payload.items
        position = key.to_integer()
        if 0 <= position < len(items):
            return items[position]
        logger.debug("index %d is outside an array of length %d", position, len(items))
        return null()

    if value.kind is Kind.MAP:
        found = value.payload.get(key)
        if found is not None:
            return found
        logger.debug("key %s is absent", key)
        return null()

    logger.debug("index read on a %s value", value.kind)
    return null()
