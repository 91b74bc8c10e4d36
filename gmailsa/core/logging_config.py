"""Logging setup for applications embedding the Gmail client."""

import logging

from gmailsa.core.settings import GmailSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: GmailSettings | None = None) -> None:
    """Attach a stream handler to the ``gmailsa`` logger at the configured level."""
    settings = settings or GmailSettings()
    root = logging.getLogger("gmailsa")
    root.setLevel(settings.log_level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
