"""
Style result caching.

Each styled declaration owns one StyleCache, so keys never collide across
declarations and a cache lives exactly as long as its declaration.

A StyleCache has two partitions:
- selections: keyed by the normalized variant-props key
- overrides: keyed by the identity of a color-override object, then by the
  props key

clear_style_cache() empties the selections partition of every live cache.
Override partitions are only released together with their declaration.
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Mapping
from typing import Any

from dazzle_variants.specs.styled import SlotStyles, normalize_variant_value

logger = logging.getLogger(__name__)

EMPTY_KEY = "{}"

_live_caches: weakref.WeakSet[StyleCache] = weakref.WeakSet()


def _escape_key_part(text: str) -> str:
    return text.replace("\\", "\\\\").replace(":", "\\:").replace(";", "\\;")


def create_cache_key(props: Mapping[str, Any] | None) -> str:
    """
    Create a stable cache key from variant props.

    Axis names are sorted and None values skipped, so omitting an axis and
    passing None for it produce the same key. ``\\``, ``:`` and ``;`` inside
    names and values are backslash-escaped, so distinct selections never
    share a key. Non-string names cannot select an axis and are skipped.

    Args:
        props: Variant props as passed by the caller

    Returns:
        Key such as ``"size:lg;square:true;"`` or ``"{}"`` when empty
    """
    if not props:
        return EMPTY_KEY

    names = sorted(name for name in props if isinstance(name, str))
    key = "".join(
        f"{_escape_key_part(name)}:{_escape_key_part(normalize_variant_value(props[name]))};"
        for name in names
        if props[name] is not None
    )
    return key or EMPTY_KEY


class StyleCache:
    """Per-declaration cache of resolved slot styles."""

    def __init__(self, name: str | None = None):
        """
        Initialize an empty style cache.

        Args:
            name: Label used in log records
        """
        self.name = name or "styled"
        self._selections: dict[str, SlotStyles] = {}
        # id(override) -> (override, props key -> styles); holding the
        # override keeps its id from being reused while the entry exists
        self._overrides: dict[int, tuple[object, dict[str, SlotStyles]]] = {}
        _live_caches.add(self)

    def __len__(self) -> int:
        return len(self._selections) + sum(len(entries) for _, entries in self._overrides.values())

    def get(self, key: str) -> SlotStyles | None:
        """Get cached styles for a props key."""
        return self._selections.get(key)

    def set(self, key: str, styles: SlotStyles) -> SlotStyles:
        """
        Store styles for a props key unless already present.

        Returns:
            The cached styles (the first ones stored for the key)
        """
        logger.debug(f"Caching styles for {self.name} [{key}]")
        return self._selections.setdefault(key, styles)

    def get_override(self, override: object, key: str) -> SlotStyles | None:
        """Get cached styles for a color override object and props key."""
        entry = self._overrides.get(id(override))
        if entry is None or entry[0] is not override:
            return None
        return entry[1].get(key)

    def set_override(self, override: object, key: str, styles: SlotStyles) -> SlotStyles:
        """Store styles for a color override object and props key unless present."""
        entry = self._overrides.get(id(override))
        if entry is None or entry[0] is not override:
            entry = (override, {})
            self._overrides[id(override)] = entry
        logger.debug(f"Caching override styles for {self.name} [{key}]")
        return entry[1].setdefault(key, styles)

    def clear(self) -> None:
        """Clear the selections partition."""
        self._selections.clear()


def clear_style_cache() -> None:
    """
    Clear cached selections of every live styled declaration.

    Useful for testing or hot reloading. Override partitions are keyed by
    object identity and are released with their declaration instead.
    """
    caches = list(_live_caches)
    for cache in caches:
        cache.clear()
    logger.debug(f"Cleared style cache for {len(caches)} declarations")
