"""Unit tests for the Notifier."""

from unittest.mock import MagicMock, Mock

import pytest

from torrent_notifier.notifications import (
    AddressParseError,
    EmailTemplate,
    Mailbox,
    MessageBuildError,
    NotificationError,
    Notifier,
    SMTPClient,
    SMTPDeliveryError,
    SMTPTransportError,
)


class AcceptingClient:
    """Transport stub that accepts every message."""

    def __init__(self):
        self.sent = []

    def send(self, message):
        self.sent.append(message)


@pytest.fixture
def client():
    return AcceptingClient()


@pytest.fixture
def notifier(client):
    return Notifier("Torrents <torrents@example.com>", "jane@example.com", smtp_client=client)


def test_addresses_parsed_at_construction(notifier):
    assert notifier.from_mailbox == Mailbox("torrents@example.com", "Torrents")
    assert notifier.to_mailbox == Mailbox("jane@example.com")


def test_default_transport_is_local():
    notifier = Notifier("a@example.com", "b@example.com")

    assert isinstance(notifier.smtp_client, SMTPClient)
    assert notifier.smtp_client.host == "localhost"
    assert notifier.smtp_client.port == 25


@pytest.mark.parametrize(
    "from_address, to_address",
    [("not-an-email", "b@example.com"), ("a@example.com", "not-an-email")],
)
def test_invalid_address_fails_construction(from_address, to_address):
    with pytest.raises(AddressParseError) as exc_info:
        Notifier(from_address, to_address)

    assert "not-an-email" in str(exc_info.value)


def test_send_with_accepting_transport(notifier, client):
    notifier.send("Torrent downloaded", "All done.")

    assert len(client.sent) == 1
    message = client.sent[0]
    assert message["From"] == "Torrents <torrents@example.com>"
    assert message["To"] == "jane@example.com"
    assert message["Subject"] == "Torrent downloaded"
    assert message.get_content() == "All done.\n"


def test_message_has_date_and_message_id(notifier):
    message = notifier.build_message("Subject", "Body")

    assert message["Date"]
    assert message["Message-ID"].endswith("@example.com>")


def test_unicode_content(notifier, client):
    notifier.send("Загрузка завершена", "Файл «ubuntu.iso» готов")

    message = client.sent[0]
    assert message["Subject"] == "Загрузка завершена"
    assert "«ubuntu.iso»" in message.get_content()


def test_multiline_subject_is_build_error(notifier, client):
    with pytest.raises(MessageBuildError):
        notifier.send("line one\nline two", "body")

    assert client.sent == []


def test_transport_errors_propagate(notifier):
    notifier.smtp_client = Mock(spec=SMTPClient)
    notifier.smtp_client.send.side_effect = SMTPTransportError("no MTA")

    with pytest.raises(NotificationError):
        notifier.send("Subject", "Body")

    notifier.smtp_client.send.assert_called_once()


def test_single_attempt_without_retry():
    mock_smtp = MagicMock()
    mock_smtp.send_message.side_effect = OSError("Connection reset")
    mock_factory = Mock(return_value=mock_smtp)
    notifier = Notifier(
        "a@example.com", "b@example.com", smtp_client=SMTPClient(smtp_factory=mock_factory)
    )

    with pytest.raises(SMTPDeliveryError):
        notifier.send("Subject", "Body")

    mock_factory.assert_called_once()
    mock_smtp.send_message.assert_called_once()


def test_send_template(notifier, client):
    template = EmailTemplate(
        subject="Torrent failed: {{name}}", body="{{name}}: {{error}}\n"
    )

    notifier.send_template(template, {"name": "ubuntu.iso", "error": "disk full"})

    message = client.sent[0]
    assert message["Subject"] == "Torrent failed: ubuntu.iso"
    assert message.get_content() == "ubuntu.iso: disk full\n"


def test_success_is_logged_with_recipient(notifier, caplog):
    with caplog.at_level("INFO"):
        notifier.send("Torrent downloaded", "Body")

    records = [r for r in caplog.records if getattr(r, "event", None) == "notification.sent"]
    assert len(records) == 1
    assert records[0].component == "notifications"
    assert records[0].subject == "Torrent downloaded"


def test_invalid_transport_host_is_notification_error():
    notifier = Notifier(
        "a@example.com",
        "b@example.com",
        smtp_client=SMTPClient(host="x" * 70 + ".example.com"),
    )

    with pytest.raises(SMTPTransportError):
        notifier.send("Subject", "Body")
