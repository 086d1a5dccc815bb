import pytest
from unittest.mock import AsyncMock

from tokensale.domain.interfaces.notifier import EmailSender
from tokensale.domain.models.application import Application
from tokensale.infrastructure.mail.email_sequence import (
    CONFIRMATION_SUBJECT,
    WELCOME_SUBJECT,
    EmailSequenceNotifier,
    build_private_link,
)


@pytest.fixture
def mock_sender():
    return AsyncMock(spec=EmailSender)


@pytest.fixture
def notifier(mock_sender):
    return EmailSequenceNotifier(mock_sender, build_private_link("https://presale.example/apply"))


def test_build_private_link():
    link_builder = build_private_link("https://presale.example/apply")
    assert link_builder("abc-123") == "https://presale.example/apply#privateId=abc-123"


async def test_first_email_contains_private_link(notifier, mock_sender):
    await notifier.send_first_email("foo@bar.baz", "abc-123")

    mock_sender.send.assert_awaited_once()
    recipient, subject, html_body = mock_sender.send.call_args.args
    assert recipient == "foo@bar.baz"
    assert subject == WELCOME_SUBJECT
    assert 'href="https://presale.example/apply#privateId=abc-123"' in html_body


async def test_second_email_summarizes_locked_application(notifier, mock_sender):
    application = Application(
        public_id="q1",
        first_name="Ada",
        last_name="Lovelace",
        country="UK",
        tx_hashes=("0xaaa", "0xbbb"),
        is_locked=True,
    )

    await notifier.send_second_email("foo@bar.baz", application)

    recipient, subject, html_body = mock_sender.send.call_args.args
    assert subject == CONFIRMATION_SUBJECT
    assert "Ada Lovelace" in html_body
    assert "q1" in html_body
    assert "0xaaa" in html_body and "0xbbb" in html_body


async def test_second_email_escapes_applicant_input(notifier, mock_sender):
    await notifier.send_second_email("foo@bar.baz", Application(first_name="<b>Ada</b>"))

    html_body = mock_sender.send.call_args.args[2]
    assert "<b>Ada</b>" not in html_body
    assert "&lt;b&gt;Ada&lt;/b&gt;" in html_body


async def test_sender_failure_propagates(notifier, mock_sender):
    mock_sender.send.side_effect = ConnectionError("smtp down")

    with pytest.raises(ConnectionError):
        await notifier.send_first_email("foo@bar.baz", "abc-123")
