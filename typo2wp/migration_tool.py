"""
High-level orchestration of the Typo → WordPress migration.

This module defines a :class:`TypoMigrationTool` class that ties the
extractors, migrators, parsers and utilities into a single linear
pipeline.  The phases run in a fixed order because later phases resolve
foreign keys through id maps filled by earlier ones:

1. categories → ``map_categories`` (Typo category id → term_taxonomy_id)
2. tags → ``map_tags`` (Typo tag id → term_taxonomy_id)
3. text filters → ``map_text_filters`` (Typo filter id → (markup, filter))
4. pages
5. articles → ``map_articles`` (Typo article id → WordPress post ID)
6. comments and trackbacks

Pages and articles are matched against existing posts by
``(post_name, post_type)``.  A single match is overwritten or skipped
according to the configured policy; several matches abort the run.
Comments and trackbacks are always inserted, so running the tool twice
duplicates them.
"""

from __future__ import annotations

import os
from collections import Counter, defaultdict
from typing import Any, Callable, Dict, Optional, Tuple

from typo2wp.config import MigrationOptions
from typo2wp.extractors.typo_extractor import ARTICLE, COMMENT, PAGE, TRACKBACK, TypoSource
from typo2wp.migrators.wordpress_migrator import CATEGORY, POST_TAG, WordPressTarget
from typo2wp.models.wordpress import WordPressComment, WordPressPost
from typo2wp.parsers.text_filters import (
    DEFAULT_TEXT_FILTER,
    FilterDecoder,
    decode_filter_settings,
    resolve_text_filter,
)
from typo2wp.utils.dates import to_gmt
from typo2wp.utils.errors import AmbiguousMatchError, report_error, report_ok
from typo2wp.utils.pre_flight_checks import run_pre_flight_checks

MORE_SEPARATOR = "\n\n<!--more-->\n\n"


class TypoMigrationTool:
    """
    Encapsulates all state required to copy one Typo blog into a
    WordPress database: the two connections, the frozen options and the
    id maps shared between phases.  Outcomes of individual items are
    counted in :attr:`stats` and, when a report directory is configured,
    recorded through :mod:`typo2wp.utils.errors`.
    """

    def __init__(
        self,
        options: MigrationOptions,
        source_connection,
        dest_connection=None,
        *,
        input_fn: Callable[[str], str] = input,
        filter_decoder: FilterDecoder = decode_filter_settings,
    ) -> None:
        self.options = options
        self.source = TypoSource(source_connection)
        self.target = WordPressTarget(
            dest_connection if dest_connection is not None else source_connection,
            options.prefix,
        )
        self.input_fn = input_fn
        self.filter_decoder = filter_decoder

        self.map_categories: Dict[Any, int] = {}
        self.map_tags: Dict[Any, int] = {}
        self.map_text_filters: Dict[Any, Tuple[str, str]] = {}
        self.map_articles: Dict[Any, int] = {}
        self.stats: Dict[str, Counter] = defaultdict(Counter)

    def log_message(self, message: str, level: str = "INFO") -> None:
        print(f"[{level}] {message}")
        if self.options.report_dir:
            os.makedirs(self.options.report_dir, exist_ok=True)
            with open(os.path.join(self.options.report_dir, "migration.log"), "a", encoding="utf-8") as f:
                f.write(f"{level}: {message}\n")

    def _section(self, title: str) -> None:
        print()
        self.log_message(f"## {title}")

    def _gmt(self, value):
        return to_gmt(value, self.options.gmt_offset_hours)

    ###########################################################################
    # Taxonomies
    ###########################################################################

    def _copy_term(self, name: str, slug: str, taxonomy: str, source_id: Any) -> int:
        self.log_message(f"Copying {name} ({slug})")
        term_taxonomy_id = self.target.copy_term(name, slug, taxonomy)
        self.target.commit()
        self.stats[taxonomy]["copied"] += 1
        report_ok(
            "TERM_COPIED",
            {"kind": taxonomy, "id": source_id, "slug": slug, "title": name},
            {"term_taxonomy_id": term_taxonomy_id},
            report_dir=self.options.report_dir,
        )
        return term_taxonomy_id

    def copy_categories(self) -> Dict[Any, int]:
        self._section("Copying Categories")
        for row in self.source.categories():
            self.map_categories[row["id"]] = self._copy_term(
                row["name"], row["permalink"], CATEGORY, row["id"]
            )
        return self.map_categories

    def copy_tags(self) -> Dict[Any, int]:
        self._section("Copying Tags")
        for row in self.source.tags():
            self.map_tags[row["id"]] = self._copy_term(
                row["display_name"], row["name"], POST_TAG, row["id"]
            )
        return self.map_tags

    def process_text_filters(self) -> Dict[Any, Tuple[str, str]]:
        self._section("Processing Text Filters")
        for row in self.source.text_filters():
            markup, text_filter = resolve_text_filter(row, self.filter_decoder)
            self.log_message(f"Found {markup}, {text_filter}")
            self.map_text_filters[row["id"]] = (markup, text_filter)
        return self.map_text_filters

    ###########################################################################
    # Pages and articles
    ###########################################################################

    def _upsert_post(self, label: str, post: WordPressPost, item: Dict[str, Any]) -> Optional[int]:
        """
        Insert ``post`` or overwrite the single existing post with the same
        name and type.

        :return: The post ID, or ``None`` when the item was skipped.
        :raises AmbiguousMatchError: if more than one post matches.
        """
        kind = item["kind"]
        existing = self.target.matching_post_ids(post.name, post.post_type)
        if len(existing) > 1:
            report_error("POST_AMBIGUOUS", item, report_dir=self.options.report_dir)
            raise AmbiguousMatchError(kind, existing)

        row = post.to_row()
        if existing:
            if not self.options.should_overwrite(f"{label} already exists, overwrite?", self.input_fn):
                self.log_message("Skipping")
                self.stats[kind]["skipped"] += 1
                report_ok("POST_SKIPPED", item, report_dir=self.options.report_dir)
                return None
            post_id = existing[0]
            self.target.delete_postmeta(post_id)
            self.target.update_post(post_id, row)
            self.stats[kind]["updated"] += 1
            report_ok("POST_UPDATED", item, {"post_id": post_id}, report_dir=self.options.report_dir)
        else:
            post_id = self.target.insert_post(row)
            self.stats[kind]["inserted"] += 1
            report_ok("POST_INSERTED", item, {"post_id": post_id}, report_dir=self.options.report_dir)
        return post_id

    def copy_pages(self) -> None:
        self._section("Copying Pages")
        for row in self.source.contents(PAGE):
            title = row.get("title")
            created_at = row.get("created_at")
            updated_at = row.get("updated_at")
            self.log_message(f"Copying {title}")

            post = WordPressPost(
                author=self.options.post_author,
                date=created_at,
                date_gmt=self._gmt(created_at),
                content=row.get("body") or "",
                title=title,
                status=row.get("published") == 1,
                name=row.get("name"),
                modified=updated_at,
                modified_gmt=self._gmt(updated_at),
                post_type="page",
            )
            item = {"kind": "page", "id": row.get("id"), "slug": row.get("name"), "title": title}
            post_id = self._upsert_post("Page", post, item)
            if post_id is None:
                continue
            self.target.add_postmeta(post_id, "_wp_page_template", "default")
            self.target.commit()

    @staticmethod
    def article_content(body: Optional[str], extended: Optional[str]) -> str:
        body = body or ""
        if not (extended or "").strip():
            return body
        return f"{body}{MORE_SEPARATOR}{extended}"

    def _link_terms(self, post_id: int, links, column: str, term_map: Dict[Any, int], item: Dict[str, Any]) -> None:
        for link in links:
            term_taxonomy_id = term_map.get(link[column])
            if term_taxonomy_id is None:
                self.log_message(
                    f"No migrated term for {column} {link[column]}, link ignored", level="WARNING"
                )
                report_error("RELATIONSHIP_UNMAPPED", item, report_dir=self.options.report_dir)
                continue
            if self.target.make_relationship(post_id, term_taxonomy_id):
                self.stats["term_relationships"]["inserted"] += 1
            else:
                self.stats["term_relationships"]["kept"] += 1

    def copy_articles(self) -> Dict[Any, int]:
        self._section("Copying Articles")
        for row in self.source.contents(ARTICLE):
            title = row.get("title")
            published = row.get("published") == 1
            published_at = row.get("published_at")
            updated_at = row.get("updated_at")
            markup, text_filter = self.map_text_filters.get(row.get("text_filter_id"), DEFAULT_TEXT_FILTER)
            self.log_message(f"Copying {title}")

            fields: Dict[str, Any] = dict(
                author=self.options.post_author,
                content=self.article_content(row.get("body"), row.get("extended")),
                title=title,
                excerpt=row.get("excerpt") or "",
                status=published,
                comment_status=row.get("allow_comments") == 1,
                ping_status=row.get("allow_pings") == 1,
                name=row.get("permalink"),
                modified=updated_at,
                modified_gmt=self._gmt(updated_at),
                guid=row.get("guid"),
                post_type="post",
            )
            if published:
                fields.update(date=published_at, date_gmt=self._gmt(published_at))
            post = WordPressPost(**fields)

            item = {"kind": "article", "id": row["id"], "slug": row.get("permalink"), "title": title}
            post_id = self._upsert_post("Article", post, item)
            if post_id is None:
                continue
            self.target.add_postmeta(post_id, "_tc_post_format", markup)
            self.target.add_postmeta(post_id, "_tc_post_encoding", text_filter)
            self.map_articles[row["id"]] = post_id

            self._link_terms(
                post_id, self.source.categorizations(row["id"]), "category_id", self.map_categories, item
            )
            self._link_terms(post_id, self.source.article_tags(row["id"]), "tag_id", self.map_tags, item)
            self.target.commit()
        return self.map_articles

    ###########################################################################
    # Feedback
    ###########################################################################

    def copy_comments(self) -> None:
        self._section("Copying Comments")
        for idx, row in enumerate(self.source.feedback(COMMENT)):
            created_at = row.get("created_at")
            self.log_message(f"Copying comment {idx}")
            comment = WordPressComment(
                post_id=self.map_articles.get(row.get("article_id")),
                author=row.get("author"),
                author_email=row.get("email") or "",
                author_url=row.get("url") or "",
                author_ip=row.get("ip") or "",
                date=created_at,
                date_gmt=self._gmt(created_at),
                content=row.get("body"),
                user_id=row.get("user_id") or 0,
            )
            comment_id = self.target.insert_comment(comment.to_row())
            self.target.commit()
            self.stats["comment"]["inserted"] += 1
            report_ok(
                "COMMENT_INSERTED",
                {"kind": "comment", "id": row.get("id")},
                {"comment_id": comment_id, "post_id": comment.post_id},
                report_dir=self.options.report_dir,
            )

    def copy_trackbacks(self) -> None:
        self._section("Copying Trackbacks")
        for idx, row in enumerate(self.source.feedback(TRACKBACK)):
            created_at = row.get("created_at")
            self.log_message(f"Copying trackback {idx}")
            trackback = WordPressComment(
                post_id=self.map_articles.get(row.get("article_id")),
                author=row.get("blog_name"),
                author_url=row.get("url"),
                author_ip=row.get("ip"),
                date=created_at,
                date_gmt=self._gmt(created_at),
                content=row.get("excerpt"),
                comment_type="trackback",
            )
            comment_id = self.target.insert_comment(trackback.to_row())
            self.target.commit()
            self.stats["trackback"]["inserted"] += 1
            report_ok(
                "TRACKBACK_INSERTED",
                {"kind": "trackback", "id": row.get("id"), "title": row.get("title")},
                {"comment_id": comment_id, "post_id": trackback.post_id},
                report_dir=self.options.report_dir,
            )

    ###########################################################################
    # Full run
    ###########################################################################

    def summary(self) -> Dict[str, Dict[str, int]]:
        return {kind: dict(counts) for kind, counts in self.stats.items()}

    def run(self) -> Dict[str, Dict[str, int]]:
        """
        Run every phase in order and return the per-kind outcome counts.

        :raises PreFlightCheckError: if the WordPress tables are missing.
        :raises AmbiguousMatchError: if a page or article matches several posts.
        """
        run_pre_flight_checks(self.target.connection, self.options.prefix)
        self.copy_categories()
        self.copy_tags()
        self.process_text_filters()
        self.copy_pages()
        self.copy_articles()
        self.copy_comments()
        self.copy_trackbacks()

        self._section("Summary")
        summary = self.summary()
        for kind, counts in summary.items():
            details = ", ".join(f"{outcome}: {n}" for outcome, n in sorted(counts.items()))
            self.log_message(f"{kind} - {details}")
        return summary
