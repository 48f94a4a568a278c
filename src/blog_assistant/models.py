"""Pydantic models for the blog API request and response bodies."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

_SEPARATOR = "-" * 36


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


class BlogPost(BaseModel):
    """A single blog post as returned by the list endpoint."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(description="Server-assigned post ID")
    title: str = Field(description="Post title")
    author: str = Field(description="Post author")
    content: str = Field(description="Post body text")
    created_at: str = Field(description="Creation timestamp, passed through as received")

    def __str__(self) -> str:
        return (
            f"ID: {self.id}\n"
            f"Title: {self.title}\n"
            f"Author: {self.author}\n"
            f"Content: {self.content}\n"
            f"Created at: {self.created_at}\n"
            f"{_SEPARATOR}"
        )


class Meta(BaseModel):
    """Collection-level counters attached to a list response."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    total: int = Field(description="Total number of posts")
    limit: int = Field(description="Maximum number of posts allowed")
    can_add_more: bool = Field(description="Whether new posts are still accepted")

    def __str__(self) -> str:
        return (
            f"Total posts: {self.total}, Limit: {self.limit}, "
            f"Can add more: {_yes_no(self.can_add_more)}"
        )


class AllBlogsResponse(BaseModel):
    """Response from GET ?api=blogs."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    data: tuple[BlogPost, ...] | None = Field(
        default=None, description="Posts in server order; None when sent as null or omitted"
    )
    meta: Meta | None = Field(default=None, description="Collection counters, if sent")

    @property
    def posts(self) -> tuple[BlogPost, ...]:
        """Posts in server order, empty when the server sent none."""
        return self.data or ()


class NewBlogPostRequest(BaseModel):
    """Payload for POST ?api=blogs. ID and timestamp are assigned by the server."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str
    content: str
    author: str


class Statistics(BaseModel):
    """Response from GET ?api=stats."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    total_posts: int = Field(description="Posts currently stored")
    max_posts: int = Field(description="Post capacity of the site")
    remaining_posts: int = Field(description="Posts that can still be added")
    percentage_used: float = Field(description="Capacity used, 0-100, not clamped")
    can_add_more: bool = Field(description="Whether new posts are still accepted")

    def __str__(self) -> str:
        return (
            "System Statistics:\n"
            f"  Total posts: {self.total_posts}\n"
            f"  Max posts: {self.max_posts}\n"
            f"  Remaining posts: {self.remaining_posts}\n"
            f"  Percentage used: {self.percentage_used:.2f}%\n"
            f"  Can add more: {_yes_no(self.can_add_more)}"
        )
