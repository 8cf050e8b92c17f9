"""
Application settings loaded from environment variables.
"""

from pydantic_settings import BaseSettings


DEFAULT_JWT_SECRET = "change-me-jwt-secret-key"


class Settings(BaseSettings):
    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str = DEFAULT_JWT_SECRET                # HMAC secret for auth tokens
    jwt_expiry_seconds: int = 86400                     # 24 hours, no sliding renewal

    # ── Account Policy ───────────────────────────────────────────────────
    bcrypt_rounds: int = 10
    allowed_email_marker: str = "@gmail"   # only one email provider is accepted
    min_password_length: int = 6

    # ── Database ─────────────────────────────────────────────────────────
    database_url: str = "sqlite+aiosqlite:///./users.db"

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 3000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "frozen": True,
    }


config = Settings()
