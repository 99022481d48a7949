"""
WordPress database migrators and helpers.

This subpackage provides the writes against a WordPress schema: copying
taxonomy terms, inserting and overwriting posts and their metadata,
linking posts to terms while keeping usage counts in step, and inserting
comments.
"""

from .wordpress_migrator import CATEGORY, POST_TAG, WordPressTarget

__all__ = ["CATEGORY", "POST_TAG", "WordPressTarget"]
