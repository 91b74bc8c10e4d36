"""JWT-bearer assertion construction and RS256 signing."""

import time

import jwt

from gmailsa.core.errors import InvalidSender, SigningFailure
from gmailsa.crypto.keys import load_rsa_private_key
from gmailsa.crypto.types import JwtClaimSet, ServiceAccountCredential

GMAIL_SEND_EMAIL_SCOPE = "https://www.googleapis.com/auth/gmail.send"
GOOGLE_AUD_VALUE = "https://oauth2.googleapis.com/token"
ASSERTION_LIFETIME_SECONDS = 3600
ASSERTION_ALGORITHM = "RS256"


def build_claim_set(
    credential: ServiceAccountCredential,
    send_from_email: str,
    now: int | None = None,
) -> JwtClaimSet:
    """Build the claims asking to act as ``send_from_email`` for one hour."""
    if not send_from_email:
        raise InvalidSender("Delegated sender email must not be empty")
    issued_at = int(time.time()) if now is None else now
    return JwtClaimSet(
        iss=credential.client_email,
        scope=GMAIL_SEND_EMAIL_SCOPE,
        aud=GOOGLE_AUD_VALUE,
        iat=issued_at,
        exp=issued_at + ASSERTION_LIFETIME_SECONDS,
        sub=send_from_email,
    )


def sign_claim_set(credential: ServiceAccountCredential, claims: JwtClaimSet) -> str:
    """Sign a claim set with the credential's key into a compact JWS string.

    The payload is serialized in ``JwtClaimSet`` field order, which is what the
    signature covers.
    """
    private_key = load_rsa_private_key(credential.private_key)
    try:
        return jwt.encode(
            claims.model_dump(),
            private_key,
            algorithm=ASSERTION_ALGORITHM,
        )
    except (jwt.PyJWTError, ValueError, TypeError) as exc:
        raise SigningFailure(f"Failed to sign assertion: {exc}") from exc


def create_assertion(
    credential: ServiceAccountCredential,
    send_from_email: str,
    now: int | None = None,
) -> str:
    """Create a signed assertion for the token endpoint."""
    claims = build_claim_set(credential, send_from_email, now=now)
    return sign_claim_set(credential, claims)
