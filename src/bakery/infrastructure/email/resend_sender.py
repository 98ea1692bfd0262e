"""EmailSender adapter for the Resend HTTP API."""

from __future__ import annotations

import requests
import structlog

from bakery.application.email_port import EmailMessage, EmailSender
from bakery.domain.exceptions import DispatchError

logger = structlog.get_logger(__name__)


class ResendEmailSender(EmailSender):
    """Single-attempt sender; no retries (a failed email is just logged)."""

    def __init__(
        self,
        api_key: str,
        api_url: str = "https://api.resend.com/emails",
        timeout: float = 10,
        session: requests.Session | None = None,
    ) -> None:
        self._api_url = api_url
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Authorization": f"Bearer {api_key}"})

    def send(self, message: EmailMessage) -> str:
        payload = {
            "from": message.sender,
            "to": [message.to],
            "reply_to": message.reply_to,
            "subject": message.subject,
            "html": message.html_body,
        }
        logger.info("email_send", to=message.to, subject=message.subject)
        try:
            resp = self._session.post(self._api_url, json=payload, timeout=self._timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise DispatchError(f"Email to {message.to} failed: {exc}") from exc

        # Accepted by the provider; a body without an id does not undo that
        try:
            return resp.json().get("id", "")
        except (ValueError, AttributeError):
            logger.warning("email_response_unparsed", to=message.to, status=resp.status_code)
            return ""
