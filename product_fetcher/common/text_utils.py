"""
Text Utilities

Helper functions for cleaning text captured from raw markup.
"""

import html
import json
import re

_TAG_RE = re.compile(r'<[^>]+>')
_WHITESPACE_RE = re.compile(r'\s+')


def clean_text(text: str) -> str:
    """Collapse runs of whitespace and trim."""
    if not text:
        return ""
    if not isinstance(text, str):
        text = str(text)
    return _WHITESPACE_RE.sub(' ', text).strip()


def decode_entities(text: str) -> str:
    """
    Decode HTML entities and normalize whitespace.

    Args:
        text: Text captured from markup (e.g. "Tom &amp; Jerry&#39;s")

    Returns:
        Decoded text (e.g. "Tom & Jerry's")
    """
    if not text:
        return ""
    return clean_text(html.unescape(text))


def strip_tags(text: str) -> str:
    """Remove inline markup tags, keeping only their text content."""
    if not text:
        return ""
    return _TAG_RE.sub(' ', text)


def unescape_json_string(text: str) -> str:
    """
    Decode JSON string escapes (\\u00e9, \\", \\/) in a value captured
    from an embedded JSON payload. If text is not a valid JSON string
    body, only escaped slashes are undone.
    """
    if not text or '\\' not in text:
        return text
    try:
        return json.loads(f'"{text}"')
    except ValueError:
        return text.replace('\\/', '/')
