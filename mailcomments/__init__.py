"""Turn a Maildir of comment notification mails into per-page HTML fragments."""

from .aggregate import collect_comments, group_comments, merge_groups, sort_comments, sorted_groups
from .eml_to_comment import comment_from_payload, parse_mail
from .models import Comment
from .render_html import page_filename, render_fragment, write_page
from .walker import iter_mail_files

__version__ = "0.1.0"
