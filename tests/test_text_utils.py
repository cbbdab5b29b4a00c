"""Tests for common/text_utils.py: normalization, hashing and previews."""

from common.text_utils import content_hash, content_preview, normalize_text


class TestNormalizeText:
    def test_empty(self):
        assert normalize_text("") == ""
        assert normalize_text(None) == ""

    def test_strips_and_collapses_spaces(self):
        assert normalize_text("  hello \t  world  ") == "hello world"

    def test_crlf_becomes_lf(self):
        assert normalize_text("a\r\nb\rc") == "a\nb\nc"

    def test_zero_width_removed(self):
        assert normalize_text("zero\u200bwidth\ufeff") == "zerowidth"

    def test_nbsp_collapsed(self):
        assert normalize_text("a\u00a0\u00a0b") == "a b"

    def test_blank_lines_limited_to_one(self):
        assert normalize_text("para one\n\n\n\n\npara two") == "para one\n\npara two"

    def test_line_edges_trimmed(self):
        assert normalize_text("line one   \n   line two") == "line one\nline two"

    def test_case_preserved(self):
        assert normalize_text("Hello World") == "Hello World"

    def test_whitespace_only_is_empty(self):
        assert normalize_text(" \n\t \u200b ") == ""


class TestContentHash:
    def test_sha256_hex(self):
        digest = content_hash("hello")
        assert len(digest) == 64
        assert digest == "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"

    def test_visually_identical_posts_share_hash(self):
        a = normalize_text("Great  post!\r\n")
        b = normalize_text("Great post!")
        assert content_hash(a) == content_hash(b)

    def test_case_changes_hash(self):
        assert content_hash("Hello") != content_hash("hello")


class TestContentPreview:
    def test_short_text_unchanged(self):
        assert content_preview("short post") == "short post"

    def test_truncates_to_limit(self):
        assert len(content_preview("x" * 400)) == 150

    def test_single_line(self):
        assert content_preview("line one\nline two", max_chars=50) == "line one line two"

    def test_empty(self):
        assert content_preview("") == ""
