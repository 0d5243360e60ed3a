"""Index write resolution for the value core."""

from __future__ import annotations

import logging

from .core import Any, null
from .errors import BoundsError
from .model import Kind

logger = logging.getLogger(__name__)

# Largest number of null slots a single write may add to an array.
MAX_GROWTH = 1 << 20


def index_set(value: Any, key: object, item: object) -> None:
    """Apply ``value[key] = item``.

    - Array: writing past the end grows the array, filling the gap with
      nulls; a negative position, or one more than MAX_GROWTH past the
      end, raises BoundsError
    - Map: an absent key first receives a null placeholder, then *item*
    - anything else: no-op
    """
    key = key if isinstance(key, Any) else Any(key)
    item = item.clone() if isinstance(item, Any) else Any(item)

    if value.kind is Kind.ARRAY:
        items = value.payload.items
        position = key.to_integer()
        if position < 0 or position - len(items) > MAX_GROWTH:
            raise BoundsError(position)
        while len(items) <= position:
            items.append(null())
        items[position] = item
        return

    if value.kind is Kind.MAP:
        table = value.payload
        if table.get(key) is None:
            table.set(key, null())
        table.set(key, item)
        return

    logger.debug("index write on a %s value ignored", value.kind)
