"""
Parsers used by the migration pipeline.

Currently this subpackage exposes the text filter helpers from
:mod:`typo2wp.parsers.text_filters`.
"""

from .text_filters import (
    DEFAULT_TEXT_FILTER,
    MARKUP_MAP,
    decode_filter_settings,
    resolve_text_filter,
)

__all__ = ["DEFAULT_TEXT_FILTER", "MARKUP_MAP", "decode_filter_settings", "resolve_text_filter"]
