"""
SEO Gateway — Default Tag Stripper
===================================

What:  Removes the placeholder SEO elements that the front-end build ships in
       its index.html, so they do not collide with the injected metadata.
How:   A fixed tuple of named StripRule objects, each a compiled
       case-insensitive pattern plus how many matches it removes.
Who:   Called by head_injector.inject_head() for every rendered page.

Rule Set:
    ┌─────────────┬──────────────────────────────────────┬─────────┐
    │ rule        │ element                              │ removes │
    ├─────────────┼──────────────────────────────────────┼─────────┤
    │ title       │ <title>…</title>                     │ first   │
    │ description │ <meta name="description" …>          │ first   │
    │ robots      │ <meta name="robots" …>               │ first   │
    │ canonical   │ <link rel="canonical" …>             │ first   │
    │ open_graph  │ <meta property="og:*" …>             │ all     │
    │ twitter     │ <meta name="twitter:*" …>            │ all     │
    └─────────────┴──────────────────────────────────────┴─────────┘

    Matching is textual: the attribute must appear literally inside the tag,
    quoted with ' or ". Anything no rule matches passes through byte-for-byte.
"""

import re
from dataclasses import dataclass
from typing import Pattern, Tuple

# count=0 tells re.sub to replace every match
REMOVE_ALL = 0
REMOVE_FIRST = 1


@dataclass(frozen=True)
class StripRule:
    """One removable element: a name for logs/tests, a pattern, and a count."""

    name: str
    pattern: Pattern[str]
    count: int = REMOVE_FIRST


def _rule(name: str, regex: str, count: int = REMOVE_FIRST) -> StripRule:
    return StripRule(name=name, pattern=re.compile(regex, re.IGNORECASE | re.DOTALL), count=count)


DEFAULT_STRIP_RULES: Tuple[StripRule, ...] = (
    _rule("title", r"<title>.*?</title>"),
    _rule("description", r"""<meta[^>]*name=["']description["'][^>]*>"""),
    _rule("robots", r"""<meta[^>]*name=["']robots["'][^>]*>"""),
    _rule("canonical", r"""<link[^>]*rel=["']canonical["'][^>]*>"""),
    _rule("open_graph", r"""<meta[^>]*property=["']og:[^"']+["'][^>]*>""", REMOVE_ALL),
    _rule("twitter", r"""<meta[^>]*name=["']twitter:[^"']+["'][^>]*>""", REMOVE_ALL),
)


def apply_rule(html: str, rule: StripRule) -> str:
    """Remove the element(s) matched by a single rule."""
    return rule.pattern.sub("", html, count=rule.count)


def strip_default_tags(html: str, rules: Tuple[StripRule, ...] = DEFAULT_STRIP_RULES) -> str:
    """
    Remove every default SEO element from a bundle document.

    Rules run in table order on the output of the previous rule. The function
    is total: a document with none of the elements comes back unchanged.
    """
    for rule in rules:
        html = apply_rule(html, rule)
    return html
