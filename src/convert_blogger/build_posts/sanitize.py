"""Strip Blogger boilerplate from post HTML."""

import re

FOOTER_CLASS = "blogger-post-footer"

_FOOTER_RE = re.compile(
    rf"""<(\w+)\b[^>]*\bclass\s*=\s*["']{FOOTER_CLASS}["'][^>]*>.*?</\1\s*>""",
    re.IGNORECASE | re.DOTALL,
)
_SCRIPT_RE = re.compile(r"<script\b[^>]*>.*?</script\s*>", re.IGNORECASE | re.DOTALL)
_EMPTY_CENTER_RE = re.compile(r"<center>\s*</center>", re.IGNORECASE)
_NBSP_PARAGRAPH_RE = re.compile(r"<p>\s*&nbsp;\s*</p>", re.IGNORECASE)


def strip_footer_and_scripts(html: str) -> str:
    """Remove post-footer blocks, scripts, and empty center/&nbsp; wrappers."""
    if not html:
        return ""
    html = _FOOTER_RE.sub("", html)
    html = _SCRIPT_RE.sub("", html)
    # Trim residual empty centers/paras
    html = _EMPTY_CENTER_RE.sub("", html)
    html = _NBSP_PARAGRAPH_RE.sub("", html)
    return html.strip()
