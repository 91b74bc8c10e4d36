"""Gmail clients authenticated as a service account's delegated sender.

A :class:`GmailClientBuilder` performs exactly one token exchange when built.
The resulting client keeps that token for its whole lifetime and never
refreshes it; rebuild the client once the token has expired.
"""

import logging
from pathlib import Path

import httpx

from gmailsa.core.settings import GmailSettings
from gmailsa.crypto.service_account import load_service_account
from gmailsa.crypto.types import ServiceAccountCredential
from gmailsa.gmail.send_email import send_email, send_email_async
from gmailsa.gmail.types import SentMessage
from gmailsa.oauth.token_exchange import (
    AsyncHttpxTokenExchanger,
    HttpxTokenExchanger,
    retrieve_token,
    retrieve_token_async,
)
from gmailsa.oauth.types import AccessToken

logger = logging.getLogger(__name__)


class GmailClientBuilder:
    """Collects credential, sender and mode before acquiring a token."""

    def __init__(
        self,
        credential: ServiceAccountCredential,
        send_from_email: str,
        *,
        mock_mode: bool = False,
    ) -> None:
        self._credential = credential
        self._send_from_email = send_from_email
        self._mock_mode = mock_mode

    @classmethod
    def from_file(
        cls, service_account_path: str | Path, send_from_email: str
    ) -> "GmailClientBuilder":
        """Load the service-account key file at ``service_account_path``."""
        return cls(load_service_account(service_account_path), send_from_email)

    @classmethod
    def from_settings(
        cls, settings: GmailSettings | None = None
    ) -> "GmailClientBuilder":
        """Build from ``GMAIL_*`` environment settings."""
        settings = settings or GmailSettings()
        builder = cls.from_file(settings.service_account_path, settings.send_from_email)
        if settings.mock_mode:
            builder.mock_mode()
        return builder

    def mock_mode(self) -> "GmailClientBuilder":
        """Log emails instead of sending them. Token acquisition still happens.

        The would-be message is logged at INFO on ``gmailsa.gmail.send_email``;
        call :func:`gmailsa.core.logging_config.configure_logging` (or configure
        logging yourself) to see it, since Python only shows WARNING and above
        by default.
        """
        self._mock_mode = True
        return self

    def build(self, http_client: httpx.Client | None = None) -> "GmailClient":
        """Acquire a token and return a blocking client."""
        token = retrieve_token(
            self._credential,
            self._send_from_email,
            HttpxTokenExchanger(http_client),
        )
        logger.info(
            "Acquired %s token for %s (expires in %ss)",
            token.token_type,
            self._send_from_email,
            token.expires_in,
        )
        return GmailClient(
            self._send_from_email,
            token,
            mock_mode=self._mock_mode,
            http_client=http_client,
        )

    async def build_async(
        self, http_client: httpx.AsyncClient | None = None
    ) -> "AsyncGmailClient":
        """Acquire a token and return an async client."""
        token = await retrieve_token_async(
            self._credential,
            self._send_from_email,
            AsyncHttpxTokenExchanger(http_client),
        )
        logger.info(
            "Acquired %s token for %s (expires in %ss)",
            token.token_type,
            self._send_from_email,
            token.expires_in,
        )
        return AsyncGmailClient(
            self._send_from_email,
            token,
            mock_mode=self._mock_mode,
            http_client=http_client,
        )


class _BaseGmailClient:
    def __init__(
        self,
        send_from_email: str,
        token: AccessToken,
        *,
        mock_mode: bool = False,
    ) -> None:
        self._send_from_email = send_from_email
        self._token = token
        self._mock_mode = mock_mode

    @property
    def send_from_email(self) -> str:
        return self._send_from_email

    @property
    def token(self) -> AccessToken:
        return self._token

    @property
    def mock_mode(self) -> bool:
        return self._mock_mode

    @staticmethod
    def builder(
        service_account_path: str | Path, send_from_email: str
    ) -> GmailClientBuilder:
        """Alias for :meth:`GmailClientBuilder.from_file`."""
        return GmailClientBuilder.from_file(service_account_path, send_from_email)


class GmailClient(_BaseGmailClient):
    """Blocking client holding one access token."""

    def __init__(
        self,
        send_from_email: str,
        token: AccessToken,
        *,
        mock_mode: bool = False,
        http_client: httpx.Client | None = None,
    ) -> None:
        super().__init__(send_from_email, token, mock_mode=mock_mode)
        self._http_client = http_client

    def send_email(
        self, send_to_email: str, subject: str, content: str
    ) -> SentMessage | None:
        """Send a plain-text email; returns ``None`` in mock mode."""
        return send_email(
            send_to_email,
            subject,
            content,
            token=self._token,
            send_from_email=self._send_from_email,
            mock_mode=self._mock_mode,
            client=self._http_client,
        )


class AsyncGmailClient(_BaseGmailClient):
    """Async client holding one access token, safe to share across tasks."""

    def __init__(
        self,
        send_from_email: str,
        token: AccessToken,
        *,
        mock_mode: bool = False,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(send_from_email, token, mock_mode=mock_mode)
        self._http_client = http_client

    async def send_email(
        self, send_to_email: str, subject: str, content: str
    ) -> SentMessage | None:
        """Send a plain-text email; returns ``None`` in mock mode."""
        return await send_email_async(
            send_to_email,
            subject,
            content,
            token=self._token,
            send_from_email=self._send_from_email,
            mock_mode=self._mock_mode,
            client=self._http_client,
        )
