"""
PhotoStudio Backend — Email Notifier (SMTP relay)
===================================================

What:  Sends the site owner a notification for each contact form message.
How:   Builds a multipart (plain + HTML) message and hands it to the SMTP
       relay with aiosmtplib (STARTTLS on the submission port).
Who:   POST /api/send-email directly, and POST /api/contact as a background
       task after the contact row is stored.

Outcome:
    Either the relay accepted the message or IntegrationError is raised.
    There is no partial state and no retry.
"""

import html
import logging
from email.message import EmailMessage

import aiosmtplib

from photostudio.config import Settings
from photostudio.exceptions import IntegrationError
from photostudio.schemas.common import ContactEmail

logger = logging.getLogger(__name__)

SUBJECT_PREFIX = "New Message from Contact Form: "


class EmailNotifier:
    """
    Thin wrapper around one SMTP relay account.

    Args:
        settings: SMTP host/port, credentials, and the from/to addresses.
    """

    def __init__(self, settings: Settings):
        self.host = settings.smtp_host
        self.port = settings.smtp_port
        self.username = settings.email_user
        self.password = settings.email_pass
        self.sender = settings.email_from
        self.recipient = settings.email_to
        self.configured = settings.email_configured

    def build_message(self, contact: ContactEmail) -> EmailMessage:
        """Site-owner notification for one contact submission."""
        msg = EmailMessage()
        msg["From"] = self.sender
        msg["To"] = self.recipient
        msg["Subject"] = f"{SUBJECT_PREFIX}{contact.subject}"
        msg["Reply-To"] = contact.email

        msg.set_content(
            "New Message from Your Website\n\n"
            f"Name: {contact.name}\n"
            f"Email: {contact.email}\n"
            f"Subject: {contact.subject}\n\n"
            f"Message:\n{contact.message}\n"
        )

        # User-supplied text is escaped before it lands in HTML
        name, email, subject, body = (
            html.escape(value)
            for value in (contact.name, contact.email, contact.subject, contact.message)
        )
        msg.add_alternative(
            "<h2>New Message from Your Website</h2>"
            f"<p><strong>Name:</strong> {name}</p>"
            f"<p><strong>Email:</strong> {email}</p>"
            f"<p><strong>Subject:</strong> {subject}</p>"
            "<hr>"
            "<p><strong>Message:</strong></p>"
            f"<p>{body}</p>",
            subtype="html",
        )
        return msg

    async def send(self, contact: ContactEmail) -> None:
        """
        Relay one notification.

        Raises:
            IntegrationError: relay not configured, refused, or unreachable
        """
        if not self.configured:
            logger.error("Email requested but SMTP is not configured")
            raise IntegrationError(
                service="email",
                message="Failed to send email.",
                context={"reason": "not_configured"},
            )

        message = self.build_message(contact)
        try:
            await aiosmtplib.send(
                message,
                hostname=self.host,
                port=self.port,
                username=self.username,
                password=self.password,
                start_tls=True,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error("Email relay failed: %s", str(e), exc_info=True)
            raise IntegrationError(
                service="email",
                message="Failed to send email.",
                context={"error_type": type(e).__name__, "error": str(e)},
            ) from e

        logger.info("Contact notification sent to %s (subject=%r)", self.recipient, contact.subject)

    async def notify_quietly(self, contact: ContactEmail) -> None:
        """
        Background-task variant: skipped when SMTP is not configured and
        failures are logged instead of raised.
        """
        if not self.configured:
            logger.debug("Skipping contact notification: SMTP not configured")
            return
        try:
            await self.send(contact)
        except IntegrationError as e:
            logger.warning("Contact notification not delivered: %s | Context: %s", e.message, e.context)
