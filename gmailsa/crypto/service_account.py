"""Loading and saving Google service-account key files."""

from pathlib import Path

from pydantic import ValidationError

from gmailsa.core.errors import CredentialLoadFailure
from gmailsa.crypto.types import ServiceAccountCredential


def parse_service_account(
    contents: str, source: str | Path = "<string>"
) -> ServiceAccountCredential:
    """Deserialize service-account JSON into a credential."""
    try:
        return ServiceAccountCredential.model_validate_json(contents)
    except ValidationError as exc:
        raise CredentialLoadFailure(source, str(exc)) from exc


def load_service_account(path: str | Path) -> ServiceAccountCredential:
    """Read a service-account key file from disk."""
    try:
        contents = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CredentialLoadFailure(path, str(exc)) from exc
    return parse_service_account(contents, source=path)


def dump_service_account(credential: ServiceAccountCredential) -> str:
    """Serialize a credential back to Google's key file format."""
    return credential.model_dump_json(by_alias=True, indent=2)
