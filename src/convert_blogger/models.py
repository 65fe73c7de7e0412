"""Data models for the convert_blogger pipeline."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class EntryLink:
    """One entry of a Blogger ``link`` list."""
    rel: str
    href: str
    type: Optional[str] = None
    title: Optional[str] = None


@dataclass
class EntryContent:
    """HTML body of a Blogger entry."""
    body: str
    type: Optional[str] = None


@dataclass
class Thumbnail:
    """Blogger ``media$thumbnail`` reference."""
    url: str
    height: Optional[str] = None
    width: Optional[str] = None


@dataclass
class SourceEntry:
    """Blog post as read from the Blogger feed export."""
    id: str
    published: str
    updated: str
    title: Optional[str] = None
    content: Optional[EntryContent] = None
    links: list[EntryLink] = field(default_factory=list)
    authors: list[str] = field(default_factory=list)
    thumbnail: Optional[Thumbnail] = None
    comment_count: Optional[str] = None

    def link_href(self, rel: str) -> Optional[str]:
        """Return the href of the first link with the given relation."""
        for link in self.links:
            if link.rel == rel:
                return link.href
        return None


@dataclass
class GhostPost:
    """Post record in the Ghost import format (snake_case keys)."""
    id: str
    uuid: str
    title: str
    slug: str
    html: str
    comment_id: str
    plaintext: str
    created_at: str
    updated_at: str
    published_at: str
    feature_image: Optional[str] = ""
    feature_image_caption: Optional[str] = ""
    mobiledoc: Optional[str] = None
    lexical: Optional[str] = None
    featured: int = 0
    type: str = "post"
    status: str = "draft"
    locale: Optional[str] = None
    visibility: str = "public"
    email_recipient_filter: str = "all"
    custom_excerpt: Optional[str] = None
    codeinjection_head: Optional[str] = None
    codeinjection_foot: Optional[str] = None
    custom_template: Optional[str] = None
    canonical_url: Optional[str] = None
    newsletter_id: Optional[str] = None
    show_title_and_feature_image: int = 1
