from unittest.mock import AsyncMock

from tokensale.infrastructure.mail.smtp_sender import SmtpEmailSender


def make_sender(**overrides):
    settings = dict(
        host="smtp.example",
        port=2525,
        from_email="presale@example.com",
        from_name="Pre-sale",
        username="user",
        password="secret",
    )
    settings.update(overrides)
    return SmtpEmailSender(**settings)


async def test_send_delivers_html_message(mocker):
    mock_send = mocker.patch("tokensale.infrastructure.mail.smtp_sender.aiosmtplib.send", new_callable=AsyncMock)
    sender = make_sender()

    await sender.send("foo@bar.baz", "Hello", "<p>Hi</p>")

    mock_send.assert_awaited_once()
    message = mock_send.call_args.args[0]
    assert message["To"] == "foo@bar.baz"
    assert message["From"] == "Pre-sale <presale@example.com>"
    assert message["Subject"] == "Hello"
    assert mock_send.call_args.kwargs["hostname"] == "smtp.example"
    assert mock_send.call_args.kwargs["port"] == 2525
    assert mock_send.call_args.kwargs["username"] == "user"


async def test_suppressed_sender_does_not_connect(mocker):
    mock_send = mocker.patch("tokensale.infrastructure.mail.smtp_sender.aiosmtplib.send", new_callable=AsyncMock)
    sender = make_sender(suppress=True)

    await sender.send("foo@bar.baz", "Hello", "<p>Hi</p>")

    mock_send.assert_not_called()


async def test_start_tls_setting_reaches_the_client(mocker):
    mock_send = mocker.patch("tokensale.infrastructure.mail.smtp_sender.aiosmtplib.send", new_callable=AsyncMock)
    sender = make_sender(start_tls=False)

    await sender.send("foo@bar.baz", "Hello", "<p>Hi</p>")

    assert mock_send.call_args.kwargs["start_tls"] is False
