"""Modelos de request/response da API SendPulse."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TokenRequest(BaseModel):
    """Corpo de POST /oauth/access_token."""

    grant_type: str = "client_credentials"
    client_id: str
    client_secret: str


class TokenResponse(BaseModel):
    """Resposta de POST /oauth/access_token."""

    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(..., min_length=1)
    token_type: str = "Bearer"
    expires_in: int = Field(..., ge=0)


class EmailEntry(BaseModel):
    """Entrada de `emails` para inclusão/descadastro em address book."""

    email: str
    variables: dict[str, str] | None = None

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(exclude_none=True)
