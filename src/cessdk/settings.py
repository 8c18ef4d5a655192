from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, SecretStr

from .client import DEFAULT_BASE_URL, USER_AGENT


class ProxySettings(BaseModel):
    enabled: bool = False
    url: str | None = None
    username: str | None = None
    password: SecretStr | None = None

    model_config = {"extra": "forbid"}


class Settings(BaseModel):
    api_key: SecretStr | None = None
    base_url: str = Field(default=DEFAULT_BASE_URL, min_length=1)
    user_agent: str = USER_AGENT
    proxy: ProxySettings = Field(default_factory=ProxySettings)

    model_config = {"extra": "forbid"}

    def redacted(self) -> dict[str, Any]:
        data = self.model_dump(mode="json")
        if data.get("api_key") is not None:
            data["api_key"] = "***"
        proxy = data.get("proxy")
        if isinstance(proxy, dict) and proxy.get("password") is not None:
            proxy["password"] = "***"
        return data
