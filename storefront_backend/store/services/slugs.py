# store/services/slugs.py

"""
STORE SLUGS

store_name "My Shop"  -> slug "my-shop"   (URL: /store/my-shop)
slug "my-shop"        -> display "my shop"

Whitespace and hyphen runs collapse to a single hyphen, so slugging a slug
returns it unchanged and a visitor typing /store/My-Shop lands on the same store.
"""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[\s-]+")

# Characters that would break the public /store/<slug> URL.
RESERVED_CHARACTERS = frozenset("/?#")


def slugify_store_name(name: str) -> str:
    return _SEPARATORS.sub("-", (name or "").strip().lower()).strip("-")


def normalize_slug(slug: str) -> str:
    return slugify_store_name(slug)


def display_name_from_slug(slug: str) -> str:
    return (slug or "").replace("-", " ")


def has_reserved_characters(name: str) -> bool:
    return any(ch in RESERVED_CHARACTERS for ch in name or "")
