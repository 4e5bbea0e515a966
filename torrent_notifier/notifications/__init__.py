"""Email notifications for download manager events.

This package provides the notification pipeline:
- parse_email_address: `Name <address>` / bare address parsing into a Mailbox
- load_template / EmailTemplate: two-part (subject + body) template files
- TemplateRenderer: literal `{{key}}` placeholder substitution
- SMTPClient: smtplib wrapper, local mail transport by default
- Notifier: sends rendered notifications between two fixed mailboxes
"""

from .addresses import parse_email_address
from .models import (
    AddressParseError,
    EmailTemplate,
    Mailbox,
    MessageBuildError,
    NotificationError,
    NotificationTemplateError,
    SMTPDeliveryError,
    SMTPTransportError,
)
from .notifier import Notifier
from .smtp_client import SMTPClient
from .templates import TemplateRenderer, load_template

__all__ = [
    # Main service
    "Notifier",
    # Models
    "Mailbox",
    "EmailTemplate",
    # Exceptions
    "NotificationError",
    "AddressParseError",
    "NotificationTemplateError",
    "MessageBuildError",
    "SMTPTransportError",
    "SMTPDeliveryError",
    # Components
    "TemplateRenderer",
    "SMTPClient",
    # Utilities
    "parse_email_address",
    "load_template",
]
