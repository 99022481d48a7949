"""
Resolution of Typo text filter settings.

Every Typo article points at a ``text_filters`` row naming the markup
language the body was written in (``markdown``, ``textile``, ...) and a
YAML-serialized list of post-processing filters, for example::

    ---
    - :smartypants

Only the first filter is significant.  The WordPress side records both
names in post metadata so that a text-control plugin can render the
content the same way Typo did.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple

import yaml

# Legacy markup names renamed in later plugin releases.
MARKUP_MAP: Dict[str, str] = {
    "textile": "textile2",
}

NO_FILTER = "none"

DEFAULT_TEXT_FILTER: Tuple[str, str] = ("markdown", "smartypants")

FilterDecoder = Callable[[Optional[str]], str]


def decode_filter_settings(raw: Optional[str]) -> str:
    """
    Return the active filter name stored in a serialized filter list.

    The stored value is a YAML list of strings (Ruby symbols are written
    with a leading colon, which is dropped).  An empty list, a missing
    value or anything that is not a list yields ``"none"``.
    """
    if not raw:
        return NO_FILTER
    filters = yaml.safe_load(raw)
    if not isinstance(filters, list) or not filters or filters[0] is None:
        return NO_FILTER
    name = str(filters[0]).strip().lstrip(":")
    return name or NO_FILTER


def normalize_markup(markup: Optional[str]) -> str:
    """Map legacy markup names to their current equivalent."""
    markup = markup or ""
    return MARKUP_MAP.get(markup, markup)


def resolve_text_filter(
    row: Dict[str, Any], decoder: FilterDecoder = decode_filter_settings
) -> Tuple[str, str]:
    """Return the ``(markup, filter)`` pair for a ``text_filters`` row."""
    return normalize_markup(row.get("markup")), decoder(row.get("filters"))
