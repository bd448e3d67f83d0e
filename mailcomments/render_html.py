#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import re
from pathlib import Path
from urllib.parse import unquote_to_bytes, urlsplit

from jinja2 import Environment

from .config import HTML_ENCODING, TIME_FORMAT
from .errors import InvalidURLError, NoPathError, TooManySegmentsError, WriteError


def format_time(dt):
    return dt.strftime(TIME_FORMAT)


_jinja_env = Environment(autoescape=True, keep_trailing_newline=True)
_jinja_env.filters["timestamp"] = format_time

# Included into a page by the site generator, so no <html>/<body> here.
COMMENTS_TEMPLATE = _jinja_env.from_string("""
<h2>Comments</h2>
{% for comment in comments %}
<div class="comment">
	<div class="comment-name">{{ comment.name }}</div>
	<time>{{ comment.time|timestamp }}</time>
	<div class="comment-text">
		{{ comment.text }}
	</div>
</div>
{% endfor %}
""")

CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]")
BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def page_filename(raw_url):
    """Name of the HTML file for a page: the URL's path without its leading '/'.

    Only single segment paths are supported, e.g. https://example.com/my-post.
    """
    if CONTROL_CHARS_RE.search(raw_url):
        raise InvalidURLError(raw_url, "invalid URL, control character in URL")

    try:
        parts = urlsplit(raw_url)
    except ValueError as e:
        raise InvalidURLError(raw_url, f"invalid URL: {e}") from e

    if BAD_ESCAPE_RE.search(parts.path):
        raise InvalidURLError(raw_url, "invalid URL, bad escape in path")

    try:
        path = unquote_to_bytes(parts.path).decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidURLError(raw_url, "invalid URL, path is not UTF-8") from e

    if path in ("", "/"):
        raise NoPathError(raw_url)

    filename = path[1:] if path.startswith("/") else path

    if "/" in filename:
        raise TooManySegmentsError(raw_url)

    if filename in (".", "..") or "\x00" in filename:
        raise InvalidURLError(raw_url, "invalid URL, path does not name a file")

    return filename


def render_fragment(comments):
    return COMMENTS_TEMPLATE.render(comments=comments)


# -------------------
# Writer
# -------------------
def write_page(html_dir, raw_url, comments):
    """Render the comments for one page and write them to html_dir.

    An existing file for the page is replaced, never appended to.
    """
    path = Path(html_dir) / page_filename(raw_url)
    html = render_fragment(comments)

    try:
        with open(path, "w", encoding=HTML_ENCODING) as f:
            f.write(html)
    except OSError as e:
        raise WriteError(path, f"unable to write HTML: {e.strerror or e}") from e

    logging.info(f"📥 Wrote {path} ({len(comments)} comments)")
    return path
