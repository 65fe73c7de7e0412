"""Tests for convert_blogger.build_posts.build_post module."""

from datetime import datetime, timezone

from convert_blogger.build_posts.build_post import build_html, build_post, build_posts, feature_image_path
from convert_blogger.build_posts.media import IMAGE_BASE_PATH
from convert_blogger.config_loader import ConvertConfig
from convert_blogger.models import EntryContent, EntryLink, SourceEntry, Thumbnail

CONFIG = ConvertConfig()
POST_ID = "5f3c0a9b1d2e4f6a7b8c9d0e"
POST_UUID = "0b5e3f2a-6c1d-4e8f-9a7b-2c4d6e8f0a1b"


def _fixed_ids(**kwargs) -> dict:
    return {"new_id": lambda: POST_ID, "new_uuid": lambda: POST_UUID, **kwargs}


def _entry(**overrides) -> SourceEntry:
    fields = {
        "id": "tag:blogger.com,1999:blog-1.post-2",
        "published": "2020-01-01T00:00:00.000-05:00",
        "updated": "2020-01-02T10:30:00.000-05:00",
        "title": "My Post",
        "content": EntryContent(body="<p>Hi</p>", type="html"),
    }
    fields.update(overrides)
    return SourceEntry(**fields)


class TestFeatureImagePath:
    def test_thumbnail_filename_under_base_path(self) -> None:
        thumb = Thumbnail(url="https://blogger.googleusercontent.com/img/b/R29v/s72-c/img123.png")
        assert feature_image_path(thumb) == f"{IMAGE_BASE_PATH}/img123.png"

    def test_no_thumbnail(self) -> None:
        assert feature_image_path(None) == ""

    def test_thumbnail_without_filename(self) -> None:
        assert feature_image_path(Thumbnail(url="https://blogger.googleusercontent.com/")) == ""


class TestBuildHtml:
    def test_sanitizes_then_rewrites(self) -> None:
        raw = (
            "<p>Body</p><script>track()</script>"
            '<table class="tr-caption-container"><tr><td>'
            '<img src="https://blogger.googleusercontent.com/img/b/x/s1600/pic.jpg"></td></tr>'
            '<tr><td class="tr-caption">Cap</td></tr></table>'
            '<div class="blogger-post-footer">footer</div>'
        )
        result = build_html(raw, CONFIG)
        assert "<script" not in result
        assert "footer" not in result
        assert f"{IMAGE_BASE_PATH}/pic.jpg" in result
        assert result.startswith("<p>Body</p><figure")


class TestBuildPost:
    def test_end_to_end_fields(self) -> None:
        post = build_post(_entry(), CONFIG, **_fixed_ids())

        assert post.id == POST_ID
        assert post.uuid == POST_UUID
        assert post.comment_id == POST_ID
        assert post.title == "My Post"
        assert post.slug == "my-post"
        assert post.html == "<p>Hi</p>"
        assert post.plaintext == "Hi"
        assert post.status == "draft"
        assert post.type == "post"
        assert post.visibility == "public"
        assert post.email_recipient_filter == "all"
        assert post.featured == 0
        assert post.show_title_and_feature_image == 1
        assert post.feature_image == ""
        assert post.feature_image_caption == ""
        assert post.mobiledoc is None
        assert post.lexical is None
        assert post.canonical_url is None

    def test_timestamps(self) -> None:
        post = build_post(_entry(), CONFIG, **_fixed_ids())

        assert post.created_at == "2020-01-01T00:00:00.000-05:00"
        assert post.published_at == post.created_at
        assert post.updated_at == "2020-01-02T10:30:00.000-05:00"

    def test_unparseable_timestamp_uses_now(self) -> None:
        now = datetime(2024, 5, 1, 8, 0, 0, tzinfo=timezone.utc)
        post = build_post(_entry(updated="last tuesday"), CONFIG, **_fixed_ids(now=now))

        assert post.updated_at == "2024-05-01T08:00:00.000Z"
        assert post.created_at == "2020-01-01T00:00:00.000-05:00"

    def test_slug_from_alternate_link(self) -> None:
        link = EntryLink(rel="alternate", href="https://x.blogspot.com/2020/01/hello-world.html")
        post = build_post(_entry(links=[link]), CONFIG, **_fixed_ids())
        assert post.title == "My Post"
        assert post.slug == "hello-world"

    def test_feature_image_from_thumbnail(self) -> None:
        thumb = Thumbnail(url="https://blogger.googleusercontent.com/img/b/R29v/s72-c/img123.png")
        post = build_post(_entry(thumbnail=thumb), CONFIG, **_fixed_ids())
        assert post.feature_image.endswith("img123.png")
        assert post.feature_image.startswith(IMAGE_BASE_PATH)

    def test_malformed_thumbnail_url_gives_empty_feature_image(self) -> None:
        thumb = Thumbnail(url="http://[bad/s72-c/img.png")
        post = build_post(_entry(thumbnail=thumb), CONFIG, **_fixed_ids())
        assert post.feature_image == ""

    def test_malformed_alternate_link_falls_back_to_date(self) -> None:
        link = EntryLink(rel="alternate", href="http://[bad/2020/01/my-post.html")
        post = build_post(_entry(title="", links=[link]), CONFIG, **_fixed_ids())
        assert post.title == "Post 2020-01-01"
        assert post.slug == "post-2020-01-01"

    def test_malformed_alternate_link_keeps_title_slug(self) -> None:
        link = EntryLink(rel="alternate", href="http://[bad/2020/01/my-post.html")
        post = build_post(_entry(links=[link]), CONFIG, **_fixed_ids())
        assert post.slug == "my-post"

    def test_missing_content(self) -> None:
        post = build_post(_entry(content=None, title=None), CONFIG, **_fixed_ids())
        assert post.html == ""
        assert post.plaintext == ""
        assert post.title == "Post 2020-01-01"
        assert post.slug == "post-2020-01-01"

    def test_plaintext_from_rewritten_html(self) -> None:
        body = "<p>A &amp; B</p><script>\nvar x = '<b>no</b>';\n</script>"
        post = build_post(_entry(content=EntryContent(body=body)), CONFIG, **_fixed_ids())
        assert post.html == "<p>A &amp; B</p>"
        assert post.plaintext == "A & B"

    def test_default_identifiers_are_random(self) -> None:
        first = build_post(_entry(), CONFIG)
        second = build_post(_entry(), CONFIG)
        assert len(first.id) == 24
        assert first.comment_id == first.id
        assert first.id != second.id
        assert first.uuid != second.uuid


class TestBuildPosts:
    def test_preserves_count_and_order(self) -> None:
        entries = [_entry(title=f"Post {n}") for n in range(3)]
        ids = iter(["a" * 24, "b" * 24, "c" * 24])

        posts = build_posts(entries, CONFIG, new_id=lambda: next(ids), new_uuid=lambda: POST_UUID)

        assert [post.title for post in posts] == ["Post 0", "Post 1", "Post 2"]
        assert [post.id for post in posts] == ["a" * 24, "b" * 24, "c" * 24]

    def test_empty_input_returns_empty(self) -> None:
        assert build_posts([], CONFIG) == []
