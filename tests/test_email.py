import pytest

from models.email import EmailIntent
from payloads import email
from payloads.errors import ErrorKind


def test_mailto_with_subject_and_body():
    intent = EmailIntent(recipient="jane@example.com", subject="Hello World", body="Line 1\nLine 2")
    assert email.validate(intent) is None
    assert email.encode(intent) == "mailto:jane%40example.com?subject=Hello%20World&body=Line%201%0ALine%202"


def test_mailto_without_optional_parts():
    assert email.encode(EmailIntent(recipient=" jane@example.com ", subject="  ")) == "mailto:jane%40example.com"


def test_decode_reverses_encode():
    intent = EmailIntent(recipient="jane@example.com", subject="Hi & bye", body="a+b")
    decoded = email.decode(email.encode(intent))
    assert decoded == intent


def test_decode_requires_mailto_prefix():
    assert email.decode("https://example.com").kind is ErrorKind.UNPARSEABLE


@pytest.mark.parametrize(
    "recipient, kind",
    [
        ("", ErrorKind.MISSING_REQUIRED_FIELD),
        ("no-at-sign", ErrorKind.FORMAT_INVALID),
        ("a@b", ErrorKind.FORMAT_INVALID),
        ("x" * 65 + "@example.com", ErrorKind.FORMAT_INVALID),
        ("x" * 250 + "@example.com", ErrorKind.FORMAT_INVALID),
        ("jane.doe@example.co.uk", None),
    ],
)
def test_validate_recipient(recipient, kind):
    failure = email.validate_recipient(recipient)
    assert (failure.kind if failure else None) is kind


def test_subject_and_body_limits():
    assert email.validate(EmailIntent(recipient="a@b.de", subject="s" * 101)).field == "subject"
    assert email.validate(EmailIntent(recipient="a@b.de", body="b" * 501)).field == "body"
