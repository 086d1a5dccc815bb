"""EmailSender implementation delivering mail over SMTP with aiosmtplib."""

import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

import aiosmtplib

from tokensale.domain.interfaces.notifier import EmailSender
from tokensale.domain.models.common import EmailAddress

logger = logging.getLogger(__name__)

DEFAULT_SMTP_PORT = 587


class SmtpEmailSender(EmailSender):
    """Sends HTML email through an SMTP server.

    With `suppress=True` messages are built and logged but never sent
    (for local runs and admin tooling).
    """

    def __init__(
        self,
        host: str,
        from_email: str,
        port: int = DEFAULT_SMTP_PORT,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: bool = False,
        start_tls: Optional[bool] = None,
        from_name: Optional[str] = None,
        suppress: bool = False,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.start_tls = start_tls
        self.from_email = from_email
        self.from_name = from_name
        self.suppress = suppress
        logger.info(f"SmtpEmailSender initialized (host={host}:{port}, suppress={suppress}).")

    def _build_message(self, recipient: EmailAddress, subject: str, html_body: str) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{self.from_name} <{self.from_email}>" if self.from_name else self.from_email
        msg["To"] = recipient
        msg.attach(MIMEText(html_body, "html"))
        return msg

    async def send(self, recipient: EmailAddress, subject: str, html_body: str) -> None:
        msg = self._build_message(recipient, subject, html_body)
        if self.suppress:
            logger.info(f"Email suppressed: '{subject}' to {recipient}")
            return

        await aiosmtplib.send(
            msg,
            hostname=self.host,
            port=self.port,
            username=self.username,
            password=self.password,
            use_tls=self.use_tls,
            start_tls=self.start_tls,
        )
        logger.debug(f"Email '{subject}' delivered to SMTP server {self.host}.")
