"""Shared test fixtures for gmailsa."""

import json
from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from gmailsa.crypto.types import ServiceAccountCredential


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host GMAIL_* variables out of settings under test."""
    for name in (
        "GMAIL_SERVICE_ACCOUNT_PATH",
        "GMAIL_SEND_FROM_EMAIL",
        "GMAIL_MOCK_MODE",
        "GMAIL_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def private_key() -> RSAPrivateKey:
    """One RSA-2048 key shared by the whole run."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def private_key_pem(private_key: RSAPrivateKey) -> str:
    """PKCS#8 PEM form of the shared key, as Google issues it."""
    return private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture(scope="session")
def public_key_pem(private_key: RSAPrivateKey) -> str:
    """SubjectPublicKeyInfo PEM for verifying assertions."""
    return (
        private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )


@pytest.fixture
def credential_data(private_key_pem: str) -> dict[str, str]:
    """Service-account key file contents in Google's format."""
    return {
        "type": "service_account",
        "project_id": "mailer-test",
        "private_key_id": "3f9a1c0d2b7e4a6f8c5d1e0b9a7c6f5e4d3c2b1a",
        "private_key": private_key_pem,
        "client_email": "mailer@mailer-test.iam.gserviceaccount.com",
        "client_id": "104729384756102938475",
        "auth_uri": "https://accounts.google.com/o/oauth2/auth",
        "token_uri": "https://oauth2.googleapis.com/token",
        "auth_provider_x509_cert_url": "https://www.googleapis.com/oauth2/v1/certs",
        "client_x509_cert_url": (
            "https://www.googleapis.com/robot/v1/metadata/x509/"
            "mailer%40mailer-test.iam.gserviceaccount.com"
        ),
    }


@pytest.fixture
def credential(credential_data: dict[str, str]) -> ServiceAccountCredential:
    """Parsed service-account credential."""
    return ServiceAccountCredential.model_validate(credential_data)


@pytest.fixture
def credential_file(tmp_path: Path, credential_data: dict[str, str]) -> Path:
    """Service-account key file written to a temp directory."""
    path = tmp_path / "service_account.json"
    path.write_text(json.dumps(credential_data), encoding="utf-8")
    return path
