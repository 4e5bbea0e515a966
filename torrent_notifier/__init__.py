"""Settings validation and email notifications for a torrent download manager."""

__version__ = "0.1.0"
