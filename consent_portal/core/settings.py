from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app_name: str = "Consent Portal"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Endpoint of the user's approvals on the authorization server
    approvals_uri: str = Field(..., min_length=1)
    accounts_uri: str | None = None
    store_timeout_seconds: float = 30.0

    links: dict[str, str] = Field(default_factory=dict)

    jwt_secret_key: str = ""
    jwt_algorithm: str = "HS256"
    access_token_expire_seconds: int = 3600

    default_redirect_url: str = "home"
    activation_email_sent_url: str = "accounts/email_sent"


settings = Settings()
