"""Exchange of a signed assertion for a service-account access token."""

import logging
from typing import Protocol

import httpx
from pydantic import ValidationError

from gmailsa.core.errors import TokenParseError
from gmailsa.core.http import TRANSPORT_ERRORS, async_client, network_error, sync_client
from gmailsa.crypto.assertion import create_assertion
from gmailsa.crypto.types import ServiceAccountCredential
from gmailsa.oauth.types import AccessToken, TokenRequest

logger = logging.getLogger(__name__)


def build_token_request(assertion: str) -> TokenRequest:
    """Wrap an assertion in a JWT-bearer grant request."""
    return TokenRequest(assertion=assertion)


def parse_token_response(body: str) -> AccessToken:
    """Parse a token endpoint body, keeping the raw body on failure."""
    try:
        return AccessToken.model_validate_json(body)
    except ValidationError as exc:
        raise TokenParseError(body) from exc


class TokenExchanger(Protocol):
    """Blocking token exchange capability."""

    def exchange(self, assertion: str, token_uri: str) -> AccessToken: ...


class AsyncTokenExchanger(Protocol):
    """Suspending token exchange capability."""

    async def exchange(self, assertion: str, token_uri: str) -> AccessToken: ...


class HttpxTokenExchanger:
    """Posts assertions with a blocking httpx client."""

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client

    def exchange(self, assertion: str, token_uri: str) -> AccessToken:
        form = build_token_request(assertion).model_dump()
        logger.debug("Requesting access token from %s", token_uri)
        try:
            with sync_client(self._client) as client:
                response = client.post(token_uri, data=form)
        except TRANSPORT_ERRORS as exc:
            raise network_error(token_uri, exc) from exc
        return parse_token_response(response.text)


class AsyncHttpxTokenExchanger:
    """Posts assertions with an async httpx client."""

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client

    async def exchange(self, assertion: str, token_uri: str) -> AccessToken:
        form = build_token_request(assertion).model_dump()
        logger.debug("Requesting access token from %s", token_uri)
        try:
            async with async_client(self._client) as client:
                response = await client.post(token_uri, data=form)
        except TRANSPORT_ERRORS as exc:
            raise network_error(token_uri, exc) from exc
        return parse_token_response(response.text)


def retrieve_token(
    credential: ServiceAccountCredential,
    send_from_email: str,
    exchanger: TokenExchanger | None = None,
) -> AccessToken:
    """Sign an assertion for ``send_from_email`` and exchange it."""
    assertion = create_assertion(credential, send_from_email)
    exchanger = exchanger or HttpxTokenExchanger()
    return exchanger.exchange(assertion, credential.token_uri)


async def retrieve_token_async(
    credential: ServiceAccountCredential,
    send_from_email: str,
    exchanger: AsyncTokenExchanger | None = None,
) -> AccessToken:
    """Async counterpart of :func:`retrieve_token`."""
    assertion = create_assertion(credential, send_from_email)
    exchanger = exchanger or AsyncHttpxTokenExchanger()
    return await exchanger.exchange(assertion, credential.token_uri)
