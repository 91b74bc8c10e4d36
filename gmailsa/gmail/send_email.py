"""Gmail ``users.messages.send`` payload construction and round trip."""

import base64
import logging
from email.mime.text import MIMEText

import httpx
from pydantic import ValidationError

from gmailsa.core.errors import SendFailure
from gmailsa.core.http import TRANSPORT_ERRORS, async_client, network_error, sync_client
from gmailsa.gmail.types import SendEmailRequest, SentMessage
from gmailsa.oauth.types import AccessToken

logger = logging.getLogger(__name__)

# "me" resolves to the delegated sender the token was issued for.
SEND_EMAIL_ENDPOINT = "https://gmail.googleapis.com/gmail/v1/users/me/messages/send"
SEND_EMAIL_QUERY_PARAMETERS = {"alt": "json", "prettyPrint": "false"}


def build_send_request(
    send_from_email: str, receiver_email: str, subject: str, content: str
) -> SendEmailRequest:
    """Encode a plain-text RFC 822 message for the send call."""
    message = MIMEText(content, "plain", "utf-8")
    message["From"] = send_from_email
    message["To"] = receiver_email
    message["Subject"] = subject
    raw = base64.urlsafe_b64encode(message.as_bytes()).decode()
    return SendEmailRequest(raw=raw)


def parse_send_response(body: str) -> SentMessage:
    """Parse a send response body, keeping the raw body on failure."""
    try:
        return SentMessage.model_validate_json(body)
    except ValidationError as exc:
        raise SendFailure(body) from exc


def mock_print_email(
    send_from_email: str, receiver_email: str, subject: str, content: str
) -> None:
    """Log the message that would have been sent."""
    logger.info(
        "MOCK MODE SEND EMAIL\nSending from %s to %s\nSubject: %s\nContent: %s",
        send_from_email,
        receiver_email,
        subject,
        content,
    )


def _request_kwargs(request: SendEmailRequest, token: AccessToken) -> dict:
    return {
        "params": SEND_EMAIL_QUERY_PARAMETERS,
        "headers": {"Authorization": token.authorization_header},
        "json": request.model_dump(),
    }


def send_email(
    receiver_email: str,
    subject: str,
    content: str,
    *,
    token: AccessToken,
    send_from_email: str,
    mock_mode: bool,
    client: httpx.Client | None = None,
) -> SentMessage | None:
    """Send one message, or only log it in mock mode."""
    if mock_mode:
        mock_print_email(send_from_email, receiver_email, subject, content)
        return None

    request = build_send_request(send_from_email, receiver_email, subject, content)
    try:
        with sync_client(client) as http:
            response = http.post(
                SEND_EMAIL_ENDPOINT, **_request_kwargs(request, token)
            )
    except TRANSPORT_ERRORS as exc:
        raise network_error(SEND_EMAIL_ENDPOINT, exc) from exc
    sent = parse_send_response(response.text)
    logger.info("Sent message %s from %s", sent.id, send_from_email)
    return sent


async def send_email_async(
    receiver_email: str,
    subject: str,
    content: str,
    *,
    token: AccessToken,
    send_from_email: str,
    mock_mode: bool,
    client: httpx.AsyncClient | None = None,
) -> SentMessage | None:
    """Async counterpart of :func:`send_email`."""
    if mock_mode:
        mock_print_email(send_from_email, receiver_email, subject, content)
        return None

    request = build_send_request(send_from_email, receiver_email, subject, content)
    try:
        async with async_client(client) as http:
            response = await http.post(
                SEND_EMAIL_ENDPOINT, **_request_kwargs(request, token)
            )
    except TRANSPORT_ERRORS as exc:
        raise network_error(SEND_EMAIL_ENDPOINT, exc) from exc
    sent = parse_send_response(response.text)
    logger.info("Sent message %s from %s", sent.id, send_from_email)
    return sent
