"""Minimal Typo and WordPress schemas used by the test-suite."""

from sqlalchemy import Column, DateTime, Integer, MetaData, String, Table, Text

typo_metadata = MetaData()

categories = Table(
    "categories",
    typo_metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(255)),
    Column("permalink", String(255)),
    Column("position", Integer),
)

tags = Table(
    "tags",
    typo_metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(255)),
    Column("display_name", String(255)),
)

text_filters = Table(
    "text_filters",
    typo_metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(255)),
    Column("markup", String(255)),
    Column("filters", Text),
)

contents = Table(
    "contents",
    typo_metadata,
    Column("id", Integer, primary_key=True),
    Column("type", String(255)),
    Column("title", String(255)),
    Column("body", Text),
    Column("extended", Text),
    Column("excerpt", Text),
    Column("name", String(255)),
    Column("permalink", String(255)),
    Column("guid", String(255)),
    Column("text_filter_id", Integer),
    Column("published", Integer),
    Column("allow_comments", Integer),
    Column("allow_pings", Integer),
    Column("created_at", DateTime),
    Column("updated_at", DateTime),
    Column("published_at", DateTime),
)

categorizations = Table(
    "categorizations",
    typo_metadata,
    Column("id", Integer, primary_key=True),
    Column("article_id", Integer),
    Column("category_id", Integer),
)

articles_tags = Table(
    "articles_tags",
    typo_metadata,
    Column("article_id", Integer),
    Column("tag_id", Integer),
)

feedback = Table(
    "feedback",
    typo_metadata,
    Column("id", Integer, primary_key=True),
    Column("type", String(255)),
    Column("title", String(255)),
    Column("author", String(255)),
    Column("body", Text),
    Column("excerpt", Text),
    Column("email", String(255)),
    Column("url", String(255)),
    Column("ip", String(40)),
    Column("blog_name", String(255)),
    Column("user_id", Integer),
    Column("article_id", Integer),
    Column("created_at", DateTime),
)


def wordpress_tables(prefix: str = "wp_") -> MetaData:
    metadata = MetaData()
    Table(
        f"{prefix}terms",
        metadata,
        Column("term_id", Integer, primary_key=True),
        Column("name", String(200)),
        Column("slug", String(200)),
    )
    Table(
        f"{prefix}term_taxonomy",
        metadata,
        Column("term_taxonomy_id", Integer, primary_key=True),
        Column("term_id", Integer),
        Column("taxonomy", String(32)),
        Column("count", Integer, nullable=False, server_default="0"),
    )
    Table(
        f"{prefix}term_relationships",
        metadata,
        Column("object_id", Integer, primary_key=True),
        Column("term_taxonomy_id", Integer, primary_key=True),
    )
    Table(
        f"{prefix}posts",
        metadata,
        Column("ID", Integer, primary_key=True),
        Column("post_author", Integer),
        Column("post_date", DateTime),
        Column("post_date_gmt", DateTime),
        Column("post_content", Text),
        Column("post_title", Text),
        Column("post_excerpt", Text),
        Column("post_status", String(20)),
        Column("comment_status", String(20)),
        Column("ping_status", String(20)),
        Column("post_name", String(200)),
        Column("post_modified", DateTime),
        Column("post_modified_gmt", DateTime),
        Column("guid", String(255)),
        Column("post_type", String(20)),
    )
    Table(
        f"{prefix}postmeta",
        metadata,
        Column("meta_id", Integer, primary_key=True),
        Column("post_id", Integer),
        Column("meta_key", String(255)),
        Column("meta_value", Text),
    )
    Table(
        f"{prefix}comments",
        metadata,
        Column("comment_ID", Integer, primary_key=True),
        Column("comment_post_ID", Integer, nullable=True),
        Column("comment_author", Text),
        Column("comment_author_email", String(100)),
        Column("comment_author_url", String(200)),
        Column("comment_author_IP", String(100)),
        Column("comment_date", DateTime),
        Column("comment_date_gmt", DateTime),
        Column("comment_content", Text),
        Column("comment_type", String(20)),
        Column("user_id", Integer),
    )
    return metadata
