"""
SEO Gateway — Head Injector
============================

What:  Composes the final HTML document served for a page route.
How:   strip default tags → find first </head> → splice fragment + optional
       redirect script in front of it.
Who:   Called by PageService.render_page() once per request.

Output layout around the insertion point:
    ...stripped head content
    <metadata fragment>
    <redirect script, or nothing>
    </head>

    The splice is plain string concatenation, so backslashes and group
    references in the fragment or script are copied literally.
"""

import logging
import re
from typing import Optional

from seo_gateway.services.redirect_script import render_redirect_script
from seo_gateway.services.tag_stripper import strip_default_tags

logger = logging.getLogger(__name__)

_CLOSING_HEAD = re.compile(r"</head>", re.IGNORECASE)


def inject_head(bundle: str, fragment: str, redirect_target: Optional[str] = None) -> str:
    """
    Build the final document from the bundle template and fetched metadata.

    Args:
        bundle: Raw index.html contents (never modified in place)
        fragment: Metadata fragment, injected verbatim
        redirect_target: Alternate-link target; None means no script

    Returns:
        The stripped bundle with the fragment (and script) placed immediately
        before the first closing head tag. Without a closing head tag the
        stripped bundle is returned as-is and a warning is logged.
    """
    document = strip_default_tags(bundle)

    match = _CLOSING_HEAD.search(document)
    if match is None:
        logger.warning(
            "Bundle document has no closing </head> tag; metadata not injected (%d chars)",
            len(document),
        )
        return document

    script = render_redirect_script(redirect_target) if redirect_target else ""
    insertion = f"\n{fragment}\n{script}\n"

    return document[: match.start()] + insertion + document[match.start():]
