"""Email channel port — abstract interface for email dispatch."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class EmailMessage:
    to: str
    sender: str
    reply_to: str
    subject: str
    html_body: str


class EmailSender(ABC):
    """Abstract interface for email dispatch adapters."""

    @abstractmethod
    def send(self, message: EmailMessage) -> str:
        """Send one message and return the provider's message id.

        Raises DispatchError if the provider rejects the message or
        cannot be reached.
        """
