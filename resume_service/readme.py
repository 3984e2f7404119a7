"""
Profile README rendering.

GitHub profile READMEs are user-authored markdown and may embed raw HTML,
so the rendered fragment goes through an allowlist sanitizer before it is
placed in the resume (and later loaded into Chromium for PDF export).

Usage:
    from resume_service.readme import decode_readme_content, render_readme_html

    markdown_text = decode_readme_content(payload["content"])
    safe_html = render_readme_html(markdown_text)
"""

import base64
from urllib.parse import urlparse

import markdown
from bs4 import BeautifulSoup, Comment

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]

# Removed together with everything inside them
DROP_WITH_CONTENT = {
    "script", "style", "iframe", "object", "embed", "noscript",
    "template", "svg", "math", "frame", "frameset", "applet",
}

ALLOWED_TAGS = {
    "a", "abbr", "b", "blockquote", "br", "code", "dd", "del", "details",
    "div", "dl", "dt", "em", "h1", "h2", "h3", "h4", "h5", "h6", "hr", "i",
    "img", "kbd", "li", "ol", "p", "pre", "s", "span", "strong", "sub",
    "summary", "sup", "table", "tbody", "td", "tfoot", "th", "thead", "tr",
    "u", "ul",
}

ALLOWED_ATTRIBUTES = {
    "a": {"href", "name", "target", "rel"},
    "img": {"src", "alt", "title", "width", "height"},
    "*": {"id", "class"},
}

URL_ATTRIBUTES = {"href", "src"}
ALLOWED_URL_SCHEMES = {"http", "https", "mailto"}


def decode_readme_content(content: str) -> str:
    """
    Decode the base64 `content` field of GitHub's readme endpoint.

    Raises:
        binascii.Error / UnicodeDecodeError on malformed content
    """
    # GitHub wraps the payload at 60 chars; b64decode discards the newlines
    return base64.b64decode(content).decode("utf-8")


def is_safe_url(value: str) -> bool:
    """Allow http(s), mailto and relative/fragment URLs only."""
    # Browsers ignore embedded whitespace/control chars in schemes ("java\tscript:")
    compact = "".join(ch for ch in value if ord(ch) > 0x20).lower()
    scheme = urlparse(compact).scheme
    return not scheme or scheme in ALLOWED_URL_SCHEMES


def sanitize_html(html: str) -> str:
    """
    Restrict HTML to a safe subset of tags and attributes.

    - script/style and other active containers are removed with their content
    - disallowed tags are unwrapped (their text is kept)
    - attributes outside the allowlist (on*, style, ...) are dropped
    - href/src with non-http(s)/mailto schemes are dropped
    - every link opens in a new context without opener access

    Args:
        html: Untrusted HTML fragment

    Returns:
        Sanitized HTML fragment
    """
    if not html:
        return ""

    soup = BeautifulSoup(html, "html.parser")

    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()

    for tag in soup.find_all(list(DROP_WITH_CONTENT)):
        # Nested matches are already gone with their parent
        if not tag.decomposed:
            tag.decompose()

    for tag in soup.find_all(True):
        if tag.name not in ALLOWED_TAGS:
            tag.unwrap()
            continue

        allowed = ALLOWED_ATTRIBUTES["*"] | ALLOWED_ATTRIBUTES.get(tag.name, set())
        attrs = {}
        for attr, value in tag.attrs.items():
            if attr not in allowed:
                continue
            if attr in URL_ATTRIBUTES and not is_safe_url(str(value)):
                continue
            attrs[attr] = value
        tag.attrs = attrs

        if tag.name == "a":
            tag["target"] = "_blank"
            tag["rel"] = "noopener noreferrer"

    return str(soup)


def render_readme_html(markdown_text: str) -> str:
    """Render README markdown to sanitized HTML."""
    raw_html = markdown.markdown(markdown_text, extensions=MARKDOWN_EXTENSIONS)
    return sanitize_html(raw_html)
