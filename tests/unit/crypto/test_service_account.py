"""Tests for service-account key file loading."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from gmailsa.core.errors import CredentialLoadFailure
from gmailsa.crypto.service_account import (
    dump_service_account,
    load_service_account,
    parse_service_account,
)
from gmailsa.crypto.types import ServiceAccountCredential


class TestLoadServiceAccount:
    """Tests for reading key files from disk."""

    def test_loads_all_fields(
        self, credential_file: Path, credential_data: dict[str, str]
    ) -> None:
        cred = load_service_account(credential_file)
        assert cred.account_type == "service_account"
        assert cred.client_email == credential_data["client_email"]
        assert cred.token_uri == "https://oauth2.googleapis.com/token"
        assert cred.private_key == credential_data["private_key"]

    def test_roundtrip(
        self, tmp_path: Path, credential: ServiceAccountCredential
    ) -> None:
        path = tmp_path / "copy.json"
        path.write_text(dump_service_account(credential), encoding="utf-8")
        assert load_service_account(path) == credential

    def test_dump_uses_type_key(self, credential: ServiceAccountCredential) -> None:
        data = json.loads(dump_service_account(credential))
        assert data["type"] == "service_account"
        assert "account_type" not in data

    def test_missing_file(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope.json"
        with pytest.raises(CredentialLoadFailure) as exc_info:
            load_service_account(missing)
        assert exc_info.value.path == str(missing)

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CredentialLoadFailure):
            load_service_account(path)


class TestParseServiceAccount:
    """Tests for credential validation."""

    def test_missing_field(self, credential_data: dict[str, str]) -> None:
        del credential_data["client_id"]
        with pytest.raises(CredentialLoadFailure, match="client_id"):
            parse_service_account(json.dumps(credential_data))

    def test_wrong_account_type(self, credential_data: dict[str, str]) -> None:
        credential_data["type"] = "authorized_user"
        with pytest.raises(CredentialLoadFailure, match="service_account"):
            parse_service_account(json.dumps(credential_data))

    @pytest.mark.parametrize("field", ["client_email", "token_uri"])
    def test_empty_required_value(
        self, credential_data: dict[str, str], field: str
    ) -> None:
        credential_data[field] = ""
        with pytest.raises(CredentialLoadFailure, match=field):
            parse_service_account(json.dumps(credential_data))

    def test_credential_is_immutable(
        self, credential: ServiceAccountCredential
    ) -> None:
        with pytest.raises(ValidationError):
            credential.client_email = "other@example.test"  # type: ignore[misc]
