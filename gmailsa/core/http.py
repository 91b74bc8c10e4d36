"""Helpers for borrowing or opening httpx clients per round trip."""

from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager, contextmanager

import httpx

from gmailsa.core.errors import NetworkError

TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


@contextmanager
def sync_client(client: httpx.Client | None) -> Iterator[httpx.Client]:
    """Yield ``client`` unchanged, or a client closed on exit if none was given."""
    if client is not None:
        yield client
        return
    with httpx.Client() as owned:
        yield owned


@asynccontextmanager
async def async_client(
    client: httpx.AsyncClient | None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Async counterpart of :func:`sync_client`."""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient() as owned:
        yield owned


def network_error(url: str, exc: Exception) -> NetworkError:
    """Wrap a transport exception for ``url``."""
    return NetworkError(f"Request to {url} failed: {exc}")
