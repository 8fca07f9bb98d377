"""Cache key generation — content-addressed, prefixed by content ID.

Key layout: ``crispy_md_<content_id>_<xxh3 hex of the markdown>``. Every key
for one content ID shares the ``crispy_md_<content_id>_`` prefix, so all of a
document's historical renders can be found and purged without a reverse index.
"""

from __future__ import annotations

import re

import xxhash

from crispymd.types import ContentId

KEY_PREFIX = "crispy_md_"

_HASH_RE = re.compile(r"[0-9a-f]{16}")


def hash_content(markdown: str) -> str:
    """Fast non-cryptographic hash (xxh3, 64-bit) of the markdown text."""
    return xxhash.xxh3_64_hexdigest(markdown.encode("utf-8"))


def content_prefix(content_id: ContentId) -> str:
    """Prefix shared by every cache key of ``content_id``."""
    return f"{KEY_PREFIX}{content_id}_"


def generate_cache_key(content_id: ContentId, markdown: str) -> str:
    """Generate the cache key for a ``(content_id, markdown)`` pair."""
    return content_prefix(content_id) + hash_content(markdown)


def is_content_key(key: str, content_id: ContentId) -> bool:
    """True if ``key`` was generated for exactly ``content_id``.

    A prefix match alone is not enough: content ``"a"`` has prefix
    ``crispy_md_a_`` which also matches keys of content ``"a_b"``.
    """
    prefix = content_prefix(content_id)
    if not key.startswith(prefix):
        return False
    return _HASH_RE.fullmatch(key[len(prefix):]) is not None
