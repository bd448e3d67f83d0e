#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import sys


# -----------------------------
# CONFIG
# -----------------------------
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_LEVEL = "WARNING"
LOG_FILEMODE = "a"
LOG_ENCODING = "utf-8"

HTML_ENCODING = "utf-8"
TIME_FORMAT = "%Y-%m-%d %H:%M:%S %z %Z"  # 2009-11-10 23:00:00 +0000 UTC

PROGRESS_DESC = "Parsing comment mails"


# -------------------
# Logging setup
# -------------------
def setup_logging(log_file=None, level=LOG_LEVEL):
    """Configure the root logger, to a file when one is given, else stderr."""
    if log_file:
        logging.basicConfig(
            filename=log_file,
            filemode=LOG_FILEMODE,
            encoding=LOG_ENCODING,
            level=level,
            format=LOG_FORMAT,
            force=True,
        )
    else:
        logging.basicConfig(
            stream=sys.stderr,
            level=level,
            format=LOG_FORMAT,
            force=True,
        )
