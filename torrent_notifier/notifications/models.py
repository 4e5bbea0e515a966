"""Value types and exceptions for the notification pipeline."""

from dataclasses import dataclass
from email.utils import formataddr
from pathlib import Path
from typing import Mapping, Optional, Tuple, Union


class NotificationError(Exception):
    """Base exception for notification-related errors."""

    pass


class AddressParseError(NotificationError):
    """Raised when a string is neither `local@domain` nor `Name <local@domain>`."""

    pass


class NotificationTemplateError(NotificationError):
    """Raised when a template file is unreadable or breaks the header convention."""

    pass


class MessageBuildError(NotificationError):
    """Raised when the outbound message cannot be assembled."""

    pass


class SMTPTransportError(NotificationError):
    """Raised when no connection to the mail transport could be established."""

    pass


class SMTPDeliveryError(NotificationError):
    """Raised when the mail transport rejects or fails to relay the message."""

    pass


@dataclass(frozen=True)
class Mailbox:
    """An email identity: optional display name plus address."""

    address: str
    name: Optional[str] = None

    def __str__(self) -> str:
        if self.name:
            return formataddr((self.name, self.address))
        return self.address

    @property
    def domain(self) -> str:
        return self.address.rsplit("@", 1)[-1]


@dataclass(frozen=True)
class EmailTemplate:
    """Subject and body strings that may contain `{{key}}` placeholders."""

    subject: str
    body: str

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "EmailTemplate":
        """Load a template file. See templates.load_template()."""
        from .templates import load_template

        return load_template(path)

    def render(self, params: Mapping[str, object]) -> Tuple[str, str]:
        """Render subject and body with the default TemplateRenderer."""
        from .templates import TemplateRenderer

        return TemplateRenderer().render(self, params)
