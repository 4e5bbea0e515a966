#!/usr/bin/env python3
"""Render a template and send it, to check mail delivery end to end.

Usage:
    python scripts/send_test_notification.py \\
        --from "Torrents <torrents@example.com>" --to me@example.com \\
        --template templates/torrent_downloaded.txt name="Some Torrent"

SMTP and logging settings come from the environment (or a .env file); see
.env.example.
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from torrent_notifier.config import ConfigReadingError, load_environment_config
from torrent_notifier.logging.config import configure_logging
from torrent_notifier.notifications import (
    NotificationError,
    Notifier,
    SMTPClient,
    load_template,
)


def parse_params(pairs):
    """Turn key=value arguments into a parameter mapping."""
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise ValueError(f"Expected key=value, got '{pair}'")
        params[key] = value
    return params


def main() -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Send a test notification")
    parser.add_argument("--from", dest="from_address", required=True, help="Sender address")
    parser.add_argument("--to", dest="to_address", required=True, help="Recipient address")
    parser.add_argument("--template", type=Path, required=True, help="Template file")
    parser.add_argument("params", nargs="*", help="Placeholder values as key=value")
    args = parser.parse_args()

    try:
        env_config = load_environment_config()
    except ConfigReadingError as e:
        print(e, file=sys.stderr)
        return 2

    configure_logging(env_config.log_level, env_config.log_format)

    try:
        params = parse_params(args.params)
        notifier = Notifier(
            args.from_address,
            args.to_address,
            smtp_client=SMTPClient.from_environment(env_config),
        )
        notifier.send_template(load_template(args.template), params)
    except (NotificationError, ValueError) as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    print(f"✓ Notification sent to {notifier.to_mailbox}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
