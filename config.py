import os
from dataclasses import dataclass

DEFAULT_APP_URL = "http://localhost:3000"
DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./portfolio.db"


def _env(name: str, default: str | None = None) -> str | None:
    # Empty values count as unset
    value = os.getenv(name)
    return value if value else default


@dataclass(frozen=True)
class Settings:
    stripe_secret_key: str | None = None
    app_url: str = DEFAULT_APP_URL
    database_url: str = DEFAULT_DATABASE_URL
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    @property
    def payments_enabled(self) -> bool:
        return bool(self.stripe_secret_key)


def get_settings() -> Settings:
    return Settings(
        stripe_secret_key=_env("STRIPE_SECRET_KEY"),
        app_url=_env("APP_URL", DEFAULT_APP_URL).rstrip("/"),
        database_url=_env("DATABASE_URL", DEFAULT_DATABASE_URL),
        host=_env("HOST", "0.0.0.0"),
        port=int(_env("PORT", "3000")),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
