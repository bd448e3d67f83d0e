#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------
# This script: Maildir of comment mails --> HTML fragment per page
#----------------------------------------

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from . import config
from .aggregate import collect_comments, sorted_groups
from .errors import ArgumentError, CommentMailError, WriteError
from .render_html import write_page
from .walker import iter_mail_files


def build_parser():
    ap = argparse.ArgumentParser(
        prog="mailcomments",
        description="Generate HTML comment fragments from comment mails in a Maildir.",
    )
    ap.add_argument("--maildir", default="", help="Path to Maildir containing comment emails.")
    ap.add_argument("--html-dir", dest="html_dir", default="", help="Path to directory to write HTML files.")
    ap.add_argument("--log-file", default=None, help="Append log messages to this file instead of stderr.")
    ap.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {config.LOG_LEVEL}).",
    )
    ap.add_argument("--quiet", action="store_true", help="Do not show a progress bar.")
    return ap


def check_args(args):
    if not args.maildir:
        raise ArgumentError("you must provide a maildir")
    if not args.html_dir:
        raise ArgumentError("you must provide an HTML directory")


# -------------------
# Batch runner
# -------------------
def run(maildir, html_dir, quiet=False):
    """Parse every mail below maildir and write one HTML file per page.

    Returns the written paths. Stops at the first failure.
    """
    paths = tqdm(
        iter_mail_files(maildir),
        desc=config.PROGRESS_DESC,
        unit="mail",
        disable=True if quiet else None,
    )
    groups = sorted_groups(collect_comments(paths))
    logging.info(f"Found {sum(len(c) for c in groups.values())} comments on {len(groups)} pages")

    html_dir = Path(html_dir)
    try:
        html_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(html_dir, f"unable to create HTML directory: {e.strerror or e}") from e

    written = []
    for url, comments in groups.items():
        try:
            path = write_page(html_dir, url, comments)
        except CommentMailError as e:
            e.page_url = url
            raise
        print(f"Wrote {path} ({len(comments)} comments)")
        written.append(path)
    return written


# -------------------
# CLI entry
# -------------------
def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        check_args(args)
    except ArgumentError as e:
        print(e, file=sys.stderr)
        ap.print_help(sys.stderr)
        return 1

    config.setup_logging(args.log_file, args.log_level)

    try:
        run(args.maildir, args.html_dir, quiet=args.quiet)
    except CommentMailError as e:
        message = str(e)
        if getattr(e, "page_url", None) is not None:
            message = f"Unable to write HTML for page: {e.page_url}: {message}"
        if args.log_file:
            logging.error(f"⚠ {message}", exc_info=True)
        print(message, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
