"""
Text processing utilities for the detector.

Provides:
- Canonical whitespace normalization (input to hashing and signal extraction)
- Content hashing for the analysis cache
- Content previews for history listings
"""

import hashlib
import re

# Zero-width characters that scraped posts often carry invisibly
_ZERO_WIDTH_RE = re.compile('[\u200b\u200c\u200d\u2060\ufeff]')
_CONTROL_RE = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')
_HSPACE_RE = re.compile('[ \t\u00a0]+')
_TRAILING_SPACE_RE = re.compile(r' +\n')
_EXCESS_NEWLINES_RE = re.compile(r'\n{3,}')

DEFAULT_PREVIEW_CHARS = 150


def normalize_text(text: str) -> str:
    """
    Canonicalizes whitespace so visually identical posts hash identically.

    - Converts CRLF / CR line endings to LF
    - Removes zero-width and control characters (newlines and tabs survive)
    - Collapses runs of spaces/tabs to a single space
    - Strips trailing spaces on every line and leading space after a newline
    - Limits blank lines to one
    - Strips the ends

    Case is preserved. Line structure is preserved because the line-break
    signal depends on it.
    """
    if not text:
        return ""

    text = text.replace('\r\n', '\n').replace('\r', '\n')
    text = _ZERO_WIDTH_RE.sub('', text)
    text = _CONTROL_RE.sub('', text)
    text = _HSPACE_RE.sub(' ', text)
    text = _TRAILING_SPACE_RE.sub('\n', text)
    text = text.replace('\n ', '\n')
    text = _EXCESS_NEWLINES_RE.sub('\n\n', text)

    return text.strip()


def content_hash(normalized: str) -> str:
    """SHA-256 hex digest of the normalized text (the cache primary key)."""
    return hashlib.sha256(normalized.encode('utf-8')).hexdigest()


def content_preview(text: str, max_chars: int = DEFAULT_PREVIEW_CHARS) -> str:
    """First *max_chars* characters of *text*, on a single line."""
    if not text:
        return ""
    return ' '.join(text[:max_chars].split())
