from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _open_closed(value: Any) -> Any:
    if isinstance(value, bool):
        return "open" if value else "closed"
    return value


class WordPressPost(BaseModel):
    """A row of ``<prefix>posts`` as written by the migration."""

    model_config = ConfigDict(populate_by_name=True)

    author: int = Field(1, alias="post_author")
    date: Optional[datetime] = Field(None, alias="post_date")
    date_gmt: Optional[datetime] = Field(None, alias="post_date_gmt")
    content: str = Field("", alias="post_content")
    title: Optional[str] = Field(None, alias="post_title")
    excerpt: Optional[str] = Field(None, alias="post_excerpt")
    status: str = Field("draft", alias="post_status")
    comment_status: Optional[str] = None
    ping_status: Optional[str] = None
    name: Optional[str] = Field(None, alias="post_name")
    modified: Optional[datetime] = Field(None, alias="post_modified")
    modified_gmt: Optional[datetime] = Field(None, alias="post_modified_gmt")
    guid: Optional[str] = None
    post_type: str = "post"

    @field_validator("status", mode="before")
    @classmethod
    def _published_flag(cls, v: Any):
        if isinstance(v, bool):
            return "publish" if v else "draft"
        return v

    @field_validator("comment_status", "ping_status", mode="before")
    @classmethod
    def _enable_flag(cls, v: Any):
        return _open_closed(v)

    def to_row(self) -> dict[str, Any]:
        # Fields never passed in are left out so an update keeps the
        # existing column value (e.g. post_date of an unpublished draft).
        return self.model_dump(by_alias=True, exclude_unset=True)


class WordPressComment(BaseModel):
    """A row of ``<prefix>comments``; trackbacks use ``comment_type``."""

    model_config = ConfigDict(populate_by_name=True)

    post_id: Optional[int] = Field(None, alias="comment_post_ID")
    author: Optional[str] = Field(None, alias="comment_author")
    author_email: Optional[str] = Field(None, alias="comment_author_email")
    author_url: Optional[str] = Field(None, alias="comment_author_url")
    author_ip: Optional[str] = Field(None, alias="comment_author_IP")
    date: Optional[datetime] = Field(None, alias="comment_date")
    date_gmt: Optional[datetime] = Field(None, alias="comment_date_gmt")
    content: Optional[str] = Field(None, alias="comment_content")
    comment_type: Optional[str] = None
    user_id: Optional[int] = None

    def to_row(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)
