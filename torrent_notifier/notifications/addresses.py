"""Parsing of free-form email identities.

Accepts either a bare address (``jane@example.com``) or an address with a
display name (``Jane Doe <jane@example.com>``).
"""

import re

from .models import AddressParseError, Mailbox

_ADDRESS = r"(?P<address>[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9.-]+)"

ADDRESS_RE = re.compile(_ADDRESS + r"\Z")
ADDRESS_WITH_NAME_RE = re.compile(r"(?P<name>[^<]+)<" + _ADDRESS + r">\Z")


def parse_email_address(text: str) -> Mailbox:
    """Parse an email identity into a Mailbox.

    The ``Name <address>`` form is tried first; the name is stripped of
    surrounding whitespace and dropped when nothing is left. Otherwise the
    whole trimmed input must be a single address.

    Args:
        text: Free-form email identity

    Returns:
        Parsed Mailbox

    Raises:
        AddressParseError: If neither form matches
    """
    candidate = text.strip()

    match = ADDRESS_WITH_NAME_RE.search(candidate)
    if match:
        name = match.group("name").strip()
        return Mailbox(address=match.group("address"), name=name or None)

    match = ADDRESS_RE.match(candidate)
    if match:
        return Mailbox(address=match.group("address"))

    raise AddressParseError(f"Invalid email: '{text}'")
