"""
WordPress database helpers for the Typo → WordPress migration.

This module implements the low-level writes against a WordPress schema.
All tables are addressed through the configured prefix (``wp_`` by
default) and reflected from the destination database, so no model of
the WordPress schema has to be maintained here.  Lookups return the
matching identifier or ``None``; inserts return the generated primary
key.

Usage example::

    target = WordPressTarget(connection, "wp_")
    tt_id = target.copy_term("News", "news", "category")
    post_id = target.insert_post(WordPressPost(title="Hello", name="hello").to_row())
    target.make_relationship(post_id, tt_id)
    target.commit()

"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import MetaData, Table, select

CATEGORY = "category"
POST_TAG = "post_tag"


class WordPressTarget:
    """
    Reads and writes against the prefixed WordPress tables behind
    ``connection``.  Nothing is committed implicitly; callers invoke
    :meth:`commit` once an item has been fully written.
    """

    def __init__(self, connection, prefix: str = "wp_") -> None:
        self.connection = connection
        self.prefix = prefix
        self._metadata = MetaData()
        self._tables: Dict[str, Table] = {}

    def table(self, name: str) -> Table:
        """Return the reflected ``<prefix><name>`` table."""
        if name not in self._tables:
            self._tables[name] = Table(
                f"{self.prefix}{name}", self._metadata, autoload_with=self.connection
            )
        return self._tables[name]

    def _insert(self, name: str, row: Dict[str, Any]) -> Any:
        result = self.connection.execute(self.table(name).insert().values(**row))
        return result.inserted_primary_key[0]

    def commit(self) -> None:
        self.connection.commit()

    ###########################################################################
    # Taxonomy helpers
    ###########################################################################

    def find_term(self, slug: str) -> Optional[int]:
        terms = self.table("terms")
        return self.connection.execute(
            select(terms.c.term_id).where(terms.c.slug == slug)
        ).scalar()

    def find_term_taxonomy(self, term_id: int, taxonomy: str) -> Optional[int]:
        term_taxonomy = self.table("term_taxonomy")
        return self.connection.execute(
            select(term_taxonomy.c.term_taxonomy_id).where(
                term_taxonomy.c.term_id == term_id,
                term_taxonomy.c.taxonomy == taxonomy,
            )
        ).scalar()

    def copy_term(self, name: str, slug: str, taxonomy: str) -> int:
        """
        Ensure a term with ``slug`` exists and is bound to ``taxonomy``.

        Existing rows are reused, so calling this twice with the same
        arguments returns the same id and creates nothing the second time.

        :param name: Display name of the term.
        :param slug: Unique slug identifying the term.
        :param taxonomy: Either ``"category"`` or ``"post_tag"``.
        :return: The ``term_taxonomy_id`` to use in relationship rows.
        """
        term_id = self.find_term(slug)
        if term_id is None:
            term_id = self._insert("terms", {"name": name, "slug": slug})
        term_taxonomy_id = self.find_term_taxonomy(term_id, taxonomy)
        if term_taxonomy_id is None:
            term_taxonomy_id = self._insert(
                "term_taxonomy", {"term_id": term_id, "taxonomy": taxonomy, "count": 0}
            )
        return term_taxonomy_id

    def has_relationship(self, object_id: int, term_taxonomy_id: int) -> bool:
        term_relationships = self.table("term_relationships")
        return (
            self.connection.execute(
                select(term_relationships.c.object_id).where(
                    term_relationships.c.object_id == object_id,
                    term_relationships.c.term_taxonomy_id == term_taxonomy_id,
                )
            ).first()
            is not None
        )

    def make_relationship(self, object_id: int, term_taxonomy_id: int) -> bool:
        """
        Link a post to a term and bump the term's usage count by one.

        An existing link (an overwritten post keeps its relationships) is
        left alone and the count is not touched.

        :return: ``True`` if a relationship row was created.
        """
        if self.has_relationship(object_id, term_taxonomy_id):
            return False
        term_taxonomy = self.table("term_taxonomy")
        self._insert(
            "term_relationships",
            {"object_id": object_id, "term_taxonomy_id": term_taxonomy_id},
        )
        self.connection.execute(
            term_taxonomy.update()
            .where(term_taxonomy.c.term_taxonomy_id == term_taxonomy_id)
            .values(count=term_taxonomy.c.count + 1)
        )
        return True

    ###########################################################################
    # Post helpers
    ###########################################################################

    def matching_post_ids(self, post_name: str, post_type: str) -> List[int]:
        posts = self.table("posts")
        return list(
            self.connection.execute(
                select(posts.c.ID)
                .where(posts.c.post_name == post_name, posts.c.post_type == post_type)
                .order_by(posts.c.ID)
            ).scalars()
        )

    def insert_post(self, row: Dict[str, Any]) -> int:
        return self._insert("posts", row)

    def update_post(self, post_id: int, row: Dict[str, Any]) -> None:
        posts = self.table("posts")
        self.connection.execute(posts.update().where(posts.c.ID == post_id).values(**row))

    def delete_postmeta(self, post_id: int) -> None:
        postmeta = self.table("postmeta")
        self.connection.execute(postmeta.delete().where(postmeta.c.post_id == post_id))

    def add_postmeta(self, post_id: int, key: str, value: str) -> None:
        self._insert("postmeta", {"post_id": post_id, "meta_key": key, "meta_value": value})

    ###########################################################################
    # Comment helpers
    ###########################################################################

    def insert_comment(self, row: Dict[str, Any]) -> int:
        return self._insert("comments", row)
