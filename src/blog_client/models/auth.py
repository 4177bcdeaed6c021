"""Token exchange models."""

from pydantic import BaseModel, Field


class TokenExchangeRequest(BaseModel):
    """Body of the refresh-token exchange request."""

    refresh_token: str = Field(alias="refreshToken", description="Refresh token value")

    model_config = {"populate_by_name": True}


class TokenExchangeResponse(BaseModel):
    """Body returned by a successful token exchange."""

    access_token: str = Field(
        alias="accessToken",
        min_length=1,
        description="Newly issued access token",
    )

    model_config = {"populate_by_name": True}
