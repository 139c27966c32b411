"""
SEO Gateway — Alternate-Link Redirect Script
=============================================

What:  Turns an alternate-link hint in a metadata fragment into a small inline
       script that moves the browser to the hinted URL.
How:   find_redirect_target() scans the fragment's <link> tags; the first one
       with rel="alternate" supplies the target. render_redirect_script()
       embeds the target as an escaped JavaScript string literal.
Who:   PageService extracts the target; head_injector renders the script.

Browser-side behaviour of the emitted script:
    cur = location.href without trailing slashes
    tgt = target without trailing slashes
    navigate to tgt only when cur !== tgt (literal comparison, no URL
    normalization beyond the trailing slashes)

Embedding:
    The target is serialized with json.dumps, then <, > and & are replaced by
    their \\uXXXX escapes, so no value can close the <script> element or start
    an HTML comment. Non-ASCII characters (including U+2028 / U+2029) are
    already \\u-escaped by json.dumps. A plain URL serializes to "<url>",
    byte-identical to a hand-quoted literal.
"""

import json
import re
from typing import Dict, Optional

_LINK_TAG = re.compile(r"<link\b[^>]*>", re.IGNORECASE)
_ATTRIBUTE = re.compile(
    r"""([^\s"'<>/=]+)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'=<>`]+))"""
)

_SCRIPT_UNSAFE = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
}

REDIRECT_SCRIPT_TEMPLATE = (
    "<script>(function(){{ var alt={literal}; "
    'var cur=window.location.href.replace(/\\/+$/,""); '
    'var tgt=alt.replace(/\\/+$/,""); '
    "if(alt && cur!==tgt) window.location.href=tgt; }})();</script>"
)


def _parse_attributes(tag: str) -> Dict[str, str]:
    """Lower-cased attribute names mapped to their raw values (first wins)."""
    attrs: Dict[str, str] = {}
    for match in _ATTRIBUTE.finditer(tag):
        name = match.group(1).lower()
        if name in attrs:
            continue
        value = next(v for v in match.group(2, 3, 4) if v is not None)
        attrs[name] = value
    return attrs


def find_redirect_target(fragment: str) -> Optional[str]:
    """
    Return the trimmed href of the first rel="alternate" link, or None.

    The rel comparison is case-insensitive; attribute order inside the tag
    does not matter. A link whose href is blank after trimming yields None.
    """
    if not fragment:
        return None

    for tag in _LINK_TAG.finditer(fragment):
        attrs = _parse_attributes(tag.group(0))
        if attrs.get("rel", "").strip().lower() != "alternate":
            continue
        href = attrs.get("href", "").strip()
        return href or None

    return None


def to_script_literal(value: str) -> str:
    """Serialize a string as a JavaScript literal safe inside <script>."""
    literal = json.dumps(value)
    for char, escape in _SCRIPT_UNSAFE.items():
        literal = literal.replace(char, escape)
    return literal


def render_redirect_script(target: str) -> str:
    """Inline <script> that redirects to `target` unless already there."""
    return REDIRECT_SCRIPT_TEMPLATE.format(literal=to_script_literal(target))

