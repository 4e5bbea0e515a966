"""Notifier: sends rendered notifications between two fixed mailboxes."""

from email.message import EmailMessage
from email.utils import formatdate, make_msgid
from typing import Mapping, Optional

from torrent_notifier.logging import get_logger
from torrent_notifier.logging.context import log_context

from .addresses import parse_email_address
from .models import EmailTemplate, MessageBuildError
from .smtp_client import SMTPClient
from .templates import TemplateRenderer

logger = get_logger(__name__, component="notifications")


class Notifier:
    """Sends email notifications from one mailbox to another.

    Both addresses are parsed when the notifier is created, so a bad
    address fails immediately rather than on the first send. Each send is a
    single delivery attempt; retry policy is left to the caller.
    """

    def __init__(
        self,
        from_address: str,
        to_address: str,
        smtp_client: Optional[SMTPClient] = None,
        renderer: Optional[TemplateRenderer] = None,
    ):
        """Initialize notifier.

        Args:
            from_address: Sender, as ``local@domain`` or ``Name <local@domain>``
            to_address: Recipient, in the same forms
            smtp_client: Transport; defaults to the local mail transport agent
            renderer: Template renderer used by send_template()

        Raises:
            AddressParseError: If either address is invalid
        """
        self.from_mailbox = parse_email_address(from_address)
        self.to_mailbox = parse_email_address(to_address)
        self.smtp_client = smtp_client or SMTPClient()
        self.renderer = renderer or TemplateRenderer()

    def build_message(self, subject: str, body: str) -> EmailMessage:
        """Assemble the outbound message.

        Raises:
            MessageBuildError: If a header or the body is rejected
        """
        try:
            message = EmailMessage()
            message["From"] = str(self.from_mailbox)
            message["To"] = str(self.to_mailbox)
            message["Subject"] = subject
            message["Date"] = formatdate(localtime=True)
            message["Message-ID"] = make_msgid(domain=self.from_mailbox.domain)
            message.set_content(body)
        except (ValueError, TypeError) as e:
            raise MessageBuildError(f"Failed to build email message: {e}") from e
        return message

    def send(self, subject: str, body: str) -> None:
        """Send a notification with the given subject and body.

        Raises:
            NotificationError: If building, connecting or delivery fails
        """
        message = self.build_message(subject, body)

        with log_context(recipient=self.to_mailbox.address):
            self.smtp_client.send(message)
            logger.info(
                "Notification sent",
                extra={"event": "notification.sent", "subject": subject},
            )

    def send_template(self, template: EmailTemplate, params: Mapping[str, object]) -> None:
        """Render a template with the given parameters and send the result."""
        subject, body = self.renderer.render(template, params)
        self.send(subject, body)
