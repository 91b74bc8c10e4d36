"""Type definitions for the JWT-bearer token exchange."""

from pydantic import BaseModel, ConfigDict

GRANT_TYPE_JWT_BEARER = "urn:ietf:params:oauth:grant-type:jwt-bearer"


class TokenRequest(BaseModel):
    """Form body posted to the token endpoint."""

    grant_type: str = GRANT_TYPE_JWT_BEARER
    assertion: str


class AccessToken(BaseModel):
    """Access token returned by the token endpoint."""

    model_config = ConfigDict(frozen=True)

    access_token: str
    expires_in: int
    token_type: str

    @property
    def authorization_header(self) -> str:
        """Value for the ``Authorization`` header of downstream calls."""
        return f"Bearer {self.access_token}"
