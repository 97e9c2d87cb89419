"""
Outbound email through the Resend HTTP API.

Three messages are supported: password reset, case deadline alert and
support request. Sending never raises: every failure, including a missing
API key, comes back as a MailResult with success=False.
"""

import html
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import httpx

from union_office.config import settings
from union_office.core.exceptions import ConfigurationException

logger = logging.getLogger(__name__)

BRAND_COLOR = "#1e40af"


@dataclass
class MailResult:
    success: bool
    data: dict[str, Any] | None = None
    error: str | None = None


def _layout(heading: str, body: str) -> str:
    return f"""
    <div style="font-family: sans-serif; max-width: 600px; margin: 0 auto; border: 1px solid #e5e7eb; border-radius: 12px;">
      <div style="background-color: {BRAND_COLOR}; padding: 24px; text-align: center;">
        <h1 style="color: white; margin: 0; font-size: 22px;">{heading}</h1>
      </div>
      <div style="padding: 32px;">{body}</div>
      <div style="background-color: #f9fafb; padding: 16px; text-align: center; font-size: 11px; color: #9ca3af;">
        &copy; {datetime.now().year} {html.escape(settings.MAIL_APP_NAME)}
      </div>
    </div>
    """


class MailService:
    """Client for the Resend transactional email API"""

    def __init__(
        self,
        api_key: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_key = api_key if api_key is not None else settings.RESEND_API_KEY
        self.transport = transport

    def _client(self) -> httpx.Client:
        if not self.api_key:
            raise ConfigurationException("RESEND_API_KEY is not configured")
        return httpx.Client(
            headers={"Authorization": f"Bearer {self.api_key}"},
            timeout=settings.MAIL_TIMEOUT_SECONDS,
            transport=self.transport,
        )

    def _send(self, payload: dict[str, Any]) -> MailResult:
        try:
            with self._client() as client:
                response = client.post(settings.RESEND_API_URL, json=payload)
        except ConfigurationException as e:
            logger.error("Email not sent: %s", e)
            return MailResult(success=False, error=str(e))
        except httpx.HTTPError as e:
            logger.error("Email to %s failed: %s", payload["to"], e)
            return MailResult(success=False, error=str(e))

        if response.is_error:
            logger.error("Email to %s rejected with status %s", payload["to"], response.status_code)
            return MailResult(success=False, error=response.text or f"HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError:
            # Accepted, but the body carries no JSON receipt
            logger.warning("Email to %s accepted with a non-JSON response body", payload["to"])
            data = None

        logger.info("Email sent to %s: %s", payload["to"], payload["subject"])
        return MailResult(success=True, data=data)

    def send_reset_password_email(self, email: str, user_name: str) -> MailResult:
        """Send the credentials recovery message"""
        app_name = html.escape(settings.MAIL_APP_NAME)
        body = f"""
        <h2>Dear {html.escape(user_name)},</h2>
        <p>A credentials recovery was requested for your account on {app_name}.</p>
        <p style="color: #9ca3af; font-size: 12px;">If you did not request it, contact your office administrator immediately.</p>
        """
        return self._send(
            {
                "from": f"{settings.MAIL_APP_NAME} Support <{settings.MAIL_SENDER}>",
                "to": [email],
                "subject": f"Credentials Recovery - {settings.MAIL_APP_NAME}",
                "html": _layout(app_name, body),
            }
        )

    def send_deadline_email(
        self, email: str, user_name: str, case_title: str, deadline: str, priority: str
    ) -> MailResult:
        """Send an alert about a case close to its due date"""
        body = f"""
        <h2>Attention {html.escape(user_name)},</h2>
        <p>A case needs your attention before its deadline.</p>
        <table style="width: 100%; background-color: #fef2f2; border-radius: 8px; padding: 16px;">
          <tr><td>Case</td><td style="text-align: right;"><b>{html.escape(case_title)}</b></td></tr>
          <tr><td>Deadline</td><td style="text-align: right; color: #dc2626;"><b>{html.escape(deadline)}</b></td></tr>
          <tr><td>Priority</td><td style="text-align: right;">{html.escape(priority)}</td></tr>
        </table>
        """
        return self._send(
            {
                "from": f"{settings.MAIL_APP_NAME} Deadlines <{settings.MAIL_SENDER}>",
                "to": [email],
                "subject": f"DEADLINE ALERT: {case_title}",
                "html": _layout("Case Deadline Alert", body),
            }
        )

    def send_support_email(self, name: str, email: str, subject: str, message: str) -> MailResult:
        """Forward a contact-form request to the support mailbox"""
        body = f"""
        <p><strong>From:</strong> {html.escape(name)} ({html.escape(email)})</p>
        <p><strong>Subject:</strong> {html.escape(subject)}</p>
        <hr>
        <p style="white-space: pre-wrap;">{html.escape(message)}</p>
        """
        return self._send(
            {
                "from": f"{settings.MAIL_APP_NAME} Contact Form <{settings.MAIL_SENDER}>",
                "to": [settings.SUPPORT_EMAIL],
                "reply_to": email,
                "subject": f"[SUPPORT] {subject}",
                "html": _layout("Support Request", body),
            }
        )
