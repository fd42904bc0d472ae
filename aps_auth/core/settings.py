from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="APS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False
    log_level: str = "INFO"

    client_id: str = ""
    client_secret: str = ""
    callback_url: str = "http://localhost:8000/auth/aps/callback"
    scopes: str = ""
    prompt: str | None = None

    http_timeout: float = 30.0

    @property
    def scope_list(self) -> list[str]:
        return [scope.strip() for scope in self.scopes.split(",") if scope.strip()]


settings = Settings()
