import json

import pytest


VALID_ATTRS = {
    "Name": "Alice",
    "Email": "alice@example.com",
    "Text": "Nice post!",
    "URL": "https://example.com/foo",
    "IP": "192.0.2.10",
    "UserAgent": "Mozilla/5.0",
    "Time": "1000000",
    "ID": "a1",
}


def notification_json(**attrs):
    """A notification body with every attribute wrapped as {"Type", "Value"}.

    Pass an attribute as None to leave it out.
    """
    values = dict(VALID_ATTRS, **attrs)
    wrapped = {
        key: {"Type": "String", "Value": value}
        for key, value in values.items()
        if value is not None
    }
    return json.dumps({"Type": "Notification", "MessageAttributes": wrapped})


def mail_text(body):
    return (
        "From: no-reply@sns.example.com\n"
        "To: comments@example.com\n"
        "Subject: New comment\n"
        "Content-Type: text/plain; charset=UTF-8\n"
        "\n"
        f"{body}\n"
    )


@pytest.fixture
def write_mail(tmp_path):
    """Write a comment mail below tmp_path/maildir and return its path."""
    def _write(name, subdir="cur", body=None, **attrs):
        directory = tmp_path / "maildir" / subdir
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        if body is None:
            body = notification_json(**attrs)
        path.write_text(mail_text(body), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_payload():
    return notification_json
