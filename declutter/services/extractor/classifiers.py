# declutter/services/extractor/classifiers.py
"""
Keyword and tag heuristics.

Pure functions only – every weight here is a fixed constant, nothing is
derived at runtime.
"""

import re
from typing import Dict

# ----------------------------------------------------------------------
#  Keyword vocabularies (compiled once, case-insensitive substring match)
# ----------------------------------------------------------------------
UNLIKELY_CANDIDATES_RE = re.compile(
    r"combx|comment|community|disqus|extra|foot|header|menu|remark|rss|shoutbox|"
    r"sidebar|sponsor|ad-break|agegate|pagination|pager|popup|tweet|twitter",
    re.I,
)
MAYBE_CANDIDATE_RE = re.compile(r"and|article|body|column|main|shadow", re.I)
POSITIVE_RE = re.compile(
    r"article|body|content|entry|hentry|main|page|pagination|post|text|blog|story",
    re.I,
)
NEGATIVE_RE = re.compile(
    r"combx|comment|com-|contact|foot|footer|footnote|masthead|media|meta|outbrain|"
    r"promo|related|scroll|shoutbox|sidebar|sponsor|shopping|tags|tool|widget",
    re.I,
)

# Tags whose whole subtree is dropped before scoring.
NON_CONTENT_TAGS = frozenset({
    "head", "script", "noscript", "style", "meta", "link", "object",
    "form", "textarea", "input", "select", "button",
})

# Structural tags marked block-level (and nudged down by one point).
BLOCK_TAGS = frozenset({"div", "p", "pre", "figure", "figcaption", "h1", "h2"})
LIST_TAGS = frozenset({"ul", "ol"})

# Tags scored directly by the paragraph strategy.
PARAGRAPH_TAGS = frozenset({"p", "td", "pre"})

ATTRIBUTE_WEIGHT = 25
TEXT_CHUNK_LENGTH = 25
NON_POSITIVE_CHILD_PENALTY = 5
BLOCK_PENALTY = 1
LIST_PENALTY = 2
IMAGE_BONUS = 10

_TAG_WEIGHTS: Dict[str, int] = {
    "main": 10, "article": 10,
    "section": 8,
    "p": 5, "div": 5,
    "pre": 3, "td": 3, "blockquote": 3,
    "address": -3, "ol": -3, "ul": -3, "dl": -3, "dd": -3, "dt": -3,
    "li": -3, "form": -3,
    "h1": -5, "h2": -5, "h3": -5, "h4": -5, "h5": -5, "h6": -5, "th": -5,
}


def tag_weight(tag_name: str) -> int:
    """Score delta contributed by the tag itself."""
    return _TAG_WEIGHTS.get((tag_name or "").lower(), 0)


def attribute_weight(value: str) -> int:
    """
    Score delta for a class-name or id string.

    The negative and positive checks are independent, so a value matching
    both vocabularies nets to zero.
    """
    if not isinstance(value, str) or not value:
        return 0
    weight = 0
    if NEGATIVE_RE.search(value):
        weight -= ATTRIBUTE_WEIGHT
    if POSITIVE_RE.search(value):
        weight += ATTRIBUTE_WEIGHT
    return weight


def is_unlikely_candidate(class_name: str, element_id: str) -> bool:
    """True when class/id look like boilerplate and no override keyword saves them."""
    match_string = f"{class_name or ''} {element_id or ''}"
    return bool(
        UNLIKELY_CANDIDATES_RE.search(match_string)
        and not MAYBE_CANDIDATE_RE.search(match_string)
    )


def is_non_content_tag(tag_name: str) -> bool:
    return (tag_name or "").lower() in NON_CONTENT_TAGS


def is_embedded_or_empty_image_source(src: str) -> bool:
    """Images without a usable ``src`` (blank or inline data URI) are skipped."""
    src = (src or "").strip()
    return not src or "data:image" in src


def text_score(trimmed_length: int) -> int:
    """Base score of a non-empty text run."""
    return 1 + trimmed_length // TEXT_CHUNK_LENGTH
