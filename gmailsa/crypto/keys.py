"""RSA private key parsing for service-account credentials."""

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from gmailsa.core.errors import InvalidPrivateKey


def load_rsa_private_key(private_key_pem: str) -> RSAPrivateKey:
    """Parse a PKCS#1 or PKCS#8 PEM string into an RSA private key."""
    try:
        loaded = serialization.load_pem_private_key(
            private_key_pem.encode(), password=None
        )
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise InvalidPrivateKey(f"Cannot parse private key: {exc}") from exc
    if not isinstance(loaded, RSAPrivateKey):
        raise InvalidPrivateKey(
            f"Expected an RSA private key, got {type(loaded).__name__}"
        )
    return loaded
