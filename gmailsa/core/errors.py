"""Error types raised by the service-account and Gmail client flow."""

from pathlib import Path


class GmailClientError(Exception):
    """Base class for every error raised by gmailsa."""


class CredentialLoadFailure(GmailClientError):
    """The service-account key file could not be read or deserialized."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Failed to load service account from {path}: {reason}")
        self.path = str(path)
        self.reason = reason


class InvalidPrivateKey(GmailClientError):
    """The credential's private key is not a parseable RSA PEM key."""


class InvalidSender(GmailClientError):
    """The delegated sender address is empty."""


class SigningFailure(GmailClientError):
    """The crypto layer rejected the key or claims at sign time."""


class NetworkError(GmailClientError):
    """A request could not be sent or no response was received."""


class _RawBodyError(GmailClientError):
    """Error that keeps the unparseable response body for diagnosis."""

    message = ""

    def __init__(self, raw_body: str) -> None:
        super().__init__(f"{self.message}: {raw_body}")
        self.raw_body = raw_body


class TokenParseError(_RawBodyError):
    """The token endpoint returned a body that is not a token response."""

    message = "Failed to retrieve access token"


class SendFailure(_RawBodyError):
    """The send endpoint returned a body that is not a sent message."""

    message = "Failed to send email"
