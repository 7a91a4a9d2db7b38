"""
PhotoStudio Backend — Email Notifier Unit Tests
=================================================

What:  Message construction and SMTP failure mapping for EmailNotifier.
How:   `aiosmtplib.send` is patched with an AsyncMock.
"""

from unittest.mock import AsyncMock, patch

import aiosmtplib
import pytest

from photostudio.exceptions import IntegrationError
from photostudio.schemas.common import ContactEmail
from photostudio.services.email_service import EmailNotifier

CONTACT = ContactEmail(
    name="Ada <script>",
    email="ada@example.com",
    subject="Portrait session",
    message="Hi & hello",
)


@pytest.fixture
def notifier(settings_factory):
    return EmailNotifier(settings_factory(
        smtp_host="smtp.example.com",
        smtp_port=587,
        email_user="studio",
        email_pass="app-password",
        email_from="hello@studio.example",
        email_to="owner@studio.example",
    ))


class TestBuildMessage:

    def test_headers(self, notifier):
        msg = notifier.build_message(CONTACT)
        assert msg["Subject"] == "New Message from Contact Form: Portrait session"
        assert msg["From"] == "hello@studio.example"
        assert msg["To"] == "owner@studio.example"
        assert msg["Reply-To"] == "ada@example.com"

    def test_html_part_escapes_user_text(self, notifier):
        msg = notifier.build_message(CONTACT)
        html = msg.get_body(preferencelist=("html",)).get_content()
        assert "Ada &lt;script&gt;" in html
        assert "Hi &amp; hello" in html
        assert "<script>" not in html

    def test_plain_part(self, notifier):
        msg = notifier.build_message(CONTACT)
        text = msg.get_body(preferencelist=("plain",)).get_content()
        assert "Email: ada@example.com" in text


class TestSend:

    @pytest.mark.asyncio
    async def test_send_uses_starttls(self, notifier):
        with patch("aiosmtplib.send", new_callable=AsyncMock) as send:
            await notifier.send(CONTACT)

        send.assert_awaited_once()
        kwargs = send.await_args.kwargs
        assert kwargs["hostname"] == "smtp.example.com"
        assert kwargs["port"] == 587
        assert kwargs["username"] == "studio"
        assert kwargs["start_tls"] is True

    @pytest.mark.asyncio
    async def test_smtp_failure_is_integration_error(self, notifier):
        with patch(
            "aiosmtplib.send",
            new_callable=AsyncMock,
            side_effect=aiosmtplib.SMTPException("535 auth failed"),
        ):
            with pytest.raises(IntegrationError) as exc_info:
                await notifier.send(CONTACT)
        assert exc_info.value.status_code == 500
        assert exc_info.value.service == "email"

    @pytest.mark.asyncio
    async def test_unreachable_relay_is_integration_error(self, notifier):
        with patch("aiosmtplib.send", new_callable=AsyncMock, side_effect=OSError("unreachable")):
            with pytest.raises(IntegrationError):
                await notifier.send(CONTACT)

    @pytest.mark.asyncio
    async def test_unconfigured_send_fails(self, settings_factory):
        notifier = EmailNotifier(settings_factory())
        with patch("aiosmtplib.send", new_callable=AsyncMock) as send:
            with pytest.raises(IntegrationError):
                await notifier.send(CONTACT)
        send.assert_not_awaited()


class TestNotifyQuietly:

    @pytest.mark.asyncio
    async def test_skipped_when_unconfigured(self, settings_factory):
        notifier = EmailNotifier(settings_factory())
        with patch("aiosmtplib.send", new_callable=AsyncMock) as send:
            await notifier.notify_quietly(CONTACT)
        send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failure_is_swallowed(self, notifier):
        with patch("aiosmtplib.send", new_callable=AsyncMock, side_effect=OSError("down")):
            await notifier.notify_quietly(CONTACT)
