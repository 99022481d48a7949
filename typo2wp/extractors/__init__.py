"""
Extractors for the Typo source database.

This subpackage provides read-only queries against a Typo blog schema,
returning rows as plain dictionaries keyed by column name.
"""

from .typo_extractor import ARTICLE, COMMENT, PAGE, TRACKBACK, TypoSource

__all__ = ["ARTICLE", "COMMENT", "PAGE", "TRACKBACK", "TypoSource"]
