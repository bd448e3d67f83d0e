"""Errors raised while turning comment mails into HTML.

Everything derives from CommentMailError so the CLI can report any failure
with one except clause and stop the run.
"""


class CommentMailError(Exception):
    """Base class for every failure in the pipeline."""


class ArgumentError(CommentMailError):
    """A required command line argument is missing or blank."""


# -------------------
# Filesystem
# -------------------
class FilesystemError(CommentMailError):
    def __init__(self, path, message):
        self.path = path
        super().__init__(f"{message}: {path}")


class WalkError(FilesystemError):
    """A directory could not be listed or an entry could not be stat'ed."""


class ReadError(FilesystemError):
    """A mail file could not be read."""


class WriteError(FilesystemError):
    """An HTML file could not be created, written or closed."""


# -------------------
# Mail + JSON
# -------------------
class ParseError(CommentMailError):
    def __init__(self, path, message):
        self.path = path
        super().__init__(f"unable to parse mail: {path}: {message}")


class DecodeError(CommentMailError):
    def __init__(self, path, message):
        self.path = path
        super().__init__(f"unable to decode JSON: {path}: {message}")


# -------------------
# Comment fields
# -------------------
class FieldError(CommentMailError):
    def __init__(self, field, message):
        self.field = field
        super().__init__(message)


class InvalidIPError(FieldError):
    def __init__(self, value, path=""):
        self.value = value
        super().__init__("IP", f"invalid IP found in message: {path}: {value!r}")


class InvalidTimeError(FieldError):
    def __init__(self, value, path=""):
        self.value = value
        super().__init__("Time", f"invalid unixtime: {path}: {value!r}")


class MissingFieldError(FieldError):
    def __init__(self, field):
        super().__init__(field, f"missing {field}")


class InvalidCommentError(FieldError):
    """Wraps the MissingFieldError that made a comment unusable."""

    def __init__(self, reason: MissingFieldError, path=""):
        self.reason = reason
        super().__init__(reason.field, f"invalid comment: {path}: {reason}")


# -------------------
# Page URLs
# -------------------
class URLError(CommentMailError):
    def __init__(self, url, message):
        self.url = url
        super().__init__(f"{message}: {url}")


class InvalidURLError(URLError):
    pass


class NoPathError(URLError):
    def __init__(self, url):
        super().__init__(url, "no path found in URL")


class TooManySegmentsError(URLError):
    def __init__(self, url):
        super().__init__(url, "unexpected path, too many '/' characters")
