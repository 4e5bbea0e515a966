#!/usr/bin/env python3
"""Check a download manager settings file the way the notifier reads it."""

import sys
import warnings
from pathlib import Path

from torrent_notifier.config import ConfigReadingError, read_config


def verify_config(config_file: Path) -> bool:
    """Read and validate a settings file, printing the outcome."""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        try:
            config = read_config(config_file)
        except ConfigReadingError as e:
            print(f"✗ {config_file} is not usable:\n{e}")
            return False

    print(f"✓ {config_file} is valid")
    print(f"  - Download directory: {config.download_dir}")
    print(f"  - RPC endpoint: {config.rpc_bind_address}:{config.rpc_port}{config.rpc_url}")
    print(f"  - Authentication: {'required' if config.rpc_authentication_required else 'disabled'}")
    for warning in caught:
        print(f"  ! {warning.message}")
    return True


if __name__ == "__main__":
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("settings.json")
    sys.exit(0 if verify_config(path) else 1)
