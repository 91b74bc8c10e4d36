"""Type definitions for service-account credentials and JWT assertions."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

SERVICE_ACCOUNT_TYPE = "service_account"


class ServiceAccountCredential(BaseModel):
    """Parsed Google service-account key file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    account_type: str = Field(alias="type")
    project_id: str
    private_key_id: str
    private_key: str
    client_email: str = Field(min_length=1)
    client_id: str
    auth_uri: str
    token_uri: str = Field(min_length=1)
    auth_provider_x509_cert_url: str
    client_x509_cert_url: str

    @model_validator(mode="after")
    def _check_account_type(self) -> "ServiceAccountCredential":
        if self.account_type != SERVICE_ACCOUNT_TYPE:
            raise ValueError(
                f"type must be {SERVICE_ACCOUNT_TYPE!r}, got {self.account_type!r}"
            )
        return self


class JwtClaimSet(BaseModel):
    """Claims of a JWT-bearer assertion, serialized in declaration order."""

    model_config = ConfigDict(frozen=True)

    iss: str
    scope: str
    aud: str
    iat: int
    exp: int
    sub: str = Field(min_length=1)

    @model_validator(mode="after")
    def _check_window(self) -> "JwtClaimSet":
        if self.exp <= self.iat:
            raise ValueError("exp must be later than iat")
        return self
