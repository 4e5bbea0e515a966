"""SMTP client wrapper for email delivery.

This module provides a thin wrapper around Python's smtplib. By default it
hands messages to the local mail transport agent on localhost:25; TLS and
authentication are available for remote relays.
"""

import logging
import smtplib
import ssl
from email.message import EmailMessage
from typing import Callable, Optional

from torrent_notifier.config.environment import EnvironmentConfig

from .models import SMTPDeliveryError, SMTPTransportError

logger = logging.getLogger(__name__)


class SMTPClient:
    """Wrapper around smtplib for sending email messages.

    A new connection is opened for every message and always closed again,
    whether delivery succeeds or fails. Factories can be injected for testing.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 25,
        use_tls: bool = False,
        username: Optional[str] = None,
        password: Optional[str] = None,
        smtp_factory: Optional[Callable] = None,
        smtp_ssl_factory: Optional[Callable] = None,
    ):
        """Initialize SMTP client.

        Args:
            host: Mail transport hostname
            port: Mail transport port (465 selects implicit TLS)
            use_tls: Upgrade plain connections with STARTTLS
            username: Optional login name
            password: Optional login password
            smtp_factory: Factory function for creating SMTP instances (for mocking)
            smtp_ssl_factory: Factory function for creating SMTP_SSL instances (for mocking)
        """
        self.host = host
        self.port = port
        self.use_tls = use_tls
        self.username = username
        self.password = password
        self.smtp_factory = smtp_factory or smtplib.SMTP
        self.smtp_ssl_factory = smtp_ssl_factory or smtplib.SMTP_SSL

    @classmethod
    def from_environment(cls, env_config: EnvironmentConfig, **kwargs) -> "SMTPClient":
        """Build a client from environment settings."""
        return cls(
            host=env_config.smtp_host,
            port=env_config.smtp_port,
            use_tls=env_config.smtp_use_tls,
            username=env_config.smtp_user,
            password=env_config.smtp_pass,
            **kwargs,
        )

    def send(self, message: EmailMessage) -> None:
        """Send an email message via SMTP.

        Args:
            message: Fully constructed EmailMessage to send

        Raises:
            SMTPTransportError: If the connection cannot be established
            SMTPDeliveryError: If message delivery fails
        """
        smtp = self._connect()
        try:
            if self.use_tls and self.port != 465:
                logger.debug("Upgrading connection with STARTTLS")
                smtp.starttls(context=ssl.create_default_context())

            if self.username and self.password:
                logger.debug(f"Authenticating as {self.username}")
                smtp.login(self.username, self.password)

            smtp.send_message(message)
            logger.debug(f"Message sent successfully to {message['To']}")

        except smtplib.SMTPException as e:
            error_msg = f"SMTP error during message delivery: {e}"
            logger.error(error_msg)
            raise SMTPDeliveryError(error_msg) from e
        except OSError as e:
            error_msg = f"Network error during message delivery: {e}"
            logger.error(error_msg)
            raise SMTPDeliveryError(error_msg) from e
        except Exception as e:
            error_msg = f"Unexpected error during SMTP delivery: {e}"
            logger.error(error_msg)
            raise SMTPDeliveryError(error_msg) from e
        finally:
            try:
                smtp.quit()
            except (smtplib.SMTPException, OSError) as e:
                logger.warning(f"Error closing SMTP connection: {e}")

    def _connect(self):
        """Open a connection to the configured mail transport."""
        try:
            if self.port == 465:
                logger.debug(f"Connecting to {self.host}:{self.port} with implicit TLS")
                return self.smtp_ssl_factory(
                    self.host, self.port, context=ssl.create_default_context()
                )
            logger.debug(f"Connecting to {self.host}:{self.port}")
            return self.smtp_factory(self.host, self.port)
        except (smtplib.SMTPException, OSError) as e:
            error_msg = f"Failed to connect to mail transport at {self.host}:{self.port}: {e}"
            logger.error(error_msg)
            raise SMTPTransportError(error_msg) from e
        except Exception as e:
            error_msg = (
                f"Unexpected error connecting to mail transport at {self.host}:{self.port}: {e}"
            )
            logger.error(error_msg)
            raise SMTPTransportError(error_msg) from e
