"""
Read-only access to the tables of a Typo blog database.

The schema is treated as fixed: tables are reflected on first use and
columns are accessed by name without further validation.  Every query
fetches all of its rows up front and returns them as plain dictionaries,
so callers may write to the destination (which can be the very same
connection) while iterating.
"""

from __future__ import annotations

from typing import Any, Dict, List

from sqlalchemy import MetaData, Table, select

PAGE = "Page"
ARTICLE = "Article"
COMMENT = "Comment"
TRACKBACK = "Trackback"


class TypoSource:
    """Queries against the Typo schema behind ``connection``."""

    def __init__(self, connection) -> None:
        self.connection = connection
        self._metadata = MetaData()
        self._tables: Dict[str, Table] = {}

    def table(self, name: str) -> Table:
        if name not in self._tables:
            self._tables[name] = Table(name, self._metadata, autoload_with=self.connection)
        return self._tables[name]

    def _all(self, query) -> List[Dict[str, Any]]:
        return [dict(row._mapping) for row in self.connection.execute(query)]

    def categories(self) -> List[Dict[str, Any]]:
        categories = self.table("categories")
        return self._all(select(categories).order_by(categories.c.position))

    def tags(self) -> List[Dict[str, Any]]:
        return self._all(select(self.table("tags")))

    def text_filters(self) -> List[Dict[str, Any]]:
        return self._all(select(self.table("text_filters")))

    def contents(self, kind: str) -> List[Dict[str, Any]]:
        """Pages or articles, depending on ``kind`` (``"Page"``/``"Article"``)."""
        contents = self.table("contents")
        return self._all(select(contents).where(contents.c.type == kind))

    def categorizations(self, article_id: Any) -> List[Dict[str, Any]]:
        categorizations = self.table("categorizations")
        return self._all(
            select(categorizations).where(categorizations.c.article_id == article_id)
        )

    def article_tags(self, article_id: Any) -> List[Dict[str, Any]]:
        articles_tags = self.table("articles_tags")
        return self._all(select(articles_tags).where(articles_tags.c.article_id == article_id))

    def feedback(self, kind: str) -> List[Dict[str, Any]]:
        """Comments or trackbacks, depending on ``kind``."""
        feedback = self.table("feedback")
        return self._all(select(feedback).where(feedback.c.type == kind))
