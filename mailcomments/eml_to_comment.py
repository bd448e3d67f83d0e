#!/usr/bin/env python
# -*- coding: utf-8 -*-

import ipaddress
import logging
import re
from datetime import datetime, timezone
from email import errors, policy
from email.parser import BytesParser
from pathlib import Path

from pydantic import ValidationError

from .errors import (
    DecodeError,
    InvalidCommentError,
    InvalidIPError,
    InvalidTimeError,
    MissingFieldError,
    ParseError,
    ReadError,
)
from .models import Comment, Notification


#----------------------------------------
# This module: comment mail --> Comment
#----------------------------------------

# Header defects are errors, not something to repair
MAIL_POLICY = policy.default.clone(raise_on_defect=True)

UNIXTIME_MS_RE = re.compile(r"[+-]?[0-9]+")


# -------------------
# Utilities
# -------------------
def parse_ip(value, path=""):
    try:
        return ipaddress.ip_address(value)
    except ValueError as e:
        raise InvalidIPError(value, path) from e


def parse_unixtime_ms(value, path=""):
    """Millisecond unix time -> UTC datetime, truncated to whole seconds."""
    if not UNIXTIME_MS_RE.fullmatch(value):
        raise InvalidTimeError(value, path)
    try:
        ms = int(value)
        # Truncate toward zero, negative times included
        seconds = abs(ms) // 1000
        if ms < 0:
            seconds = -seconds
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidTimeError(value, path) from e


def mail_body(msg, path=""):
    """Raw bytes of the part holding the JSON payload."""
    if not msg.is_multipart():
        return msg.get_payload(decode=True) or b""

    for part in msg.walk():
        disp = (part.get("Content-Disposition") or "").lower()
        if "attachment" in disp:
            continue  # skip attachments
        if part.get_content_type() == "text/plain":
            return part.get_payload(decode=True) or b""

    raise ParseError(path, "multipart message without a text/plain part")


# -------------------
# Parser
# -------------------
def comment_from_payload(payload, source="<payload>") -> Comment:
    """Decode a notification JSON body and build a validated Comment."""
    try:
        notification = Notification.model_validate_json(payload)
    except ValidationError as e:
        raise DecodeError(source, str(e)) from e

    attributes = notification.attributes()

    ip = attributes.value("IP")
    if ip is not None:
        ip = parse_ip(ip, source)

    t = attributes.value("Time")
    if t is not None:
        t = parse_unixtime_ms(t, source)

    # Fields are trimmed and checked for blanks before the notification is
    # sent. Check again anyway: a gap here usually means a decoding mistake.
    comment = Comment(
        name=attributes.value("Name"),
        email=attributes.value("Email"),
        text=attributes.value("Text"),
        url=attributes.value("URL"),
        ip=ip,
        user_agent=attributes.value("UserAgent"),
        time=t,
        id=attributes.value("ID"),
    )

    missing = comment.missing_field()
    if missing is not None:
        reason = MissingFieldError(missing)
        raise InvalidCommentError(reason, source) from reason

    return comment


def parse_mail(path) -> Comment:
    """Read one mail file and return the comment carried in its body."""
    path = Path(path)
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise ReadError(path, f"unable to read mail: {e.strerror or e}") from e

    if not raw.strip():
        raise ParseError(path, "empty message")

    try:
        msg = BytesParser(policy=MAIL_POLICY).parsebytes(raw)
        body = mail_body(msg, path)
    except (errors.MessageError, errors.MessageDefect) as e:
        raise ParseError(path, f"{type(e).__name__}: {e}") from e

    comment = comment_from_payload(body, source=str(path))

    logging.info(f"✔ Parsed {path} → {comment.url}")
    return comment
