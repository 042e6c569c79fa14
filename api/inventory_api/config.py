from pydantic import BaseModel
from typing import List, Optional
from dotenv import load_dotenv
import os

# Load environment variables
load_dotenv()

DEFAULT_PORT = 5001
DEFAULT_MAX_BODY_BYTES = 50 * 1024 * 1024
TEST_DATABASE_URL = "sqlite://"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class ConfigurationError(RuntimeError):
    """Raised when the process cannot start with the given environment."""


class Settings(BaseModel):
    database_url: str
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    cors_origins: List[str] = ["*"]
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES
    expose_error_details: bool = True
    log_level: str = "INFO"
    sql_echo: bool = False


def _env_flag(env, name: str, default: bool) -> bool:
    value = env.get(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUE_VALUES


def get_settings(environ: Optional[dict] = None) -> Settings:
    """
    Build the settings from the environment.

    DATABASE_URL is mandatory unless ENV is "test", in which case an
    in-memory SQLite database is used.
    """
    env = os.environ if environ is None else environ

    database_url = env.get("DATABASE_URL")
    if not database_url:
        if env.get("ENV") == "test":
            database_url = TEST_DATABASE_URL
        else:
            raise ConfigurationError("Database connection string (DATABASE_URL) is not defined.")

    origins = env.get("CORS_ORIGINS", "*")

    try:
        port = int(env.get("PORT", DEFAULT_PORT))
        max_body_bytes = int(env.get("MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES))
    except ValueError as e:
        raise ConfigurationError(f"Invalid numeric setting: {e}") from e

    expose = _env_flag(env, "EXPOSE_ERROR_DETAILS", True)
    sql_echo = _env_flag(env, "SQL_ECHO", False)

    return Settings(
        database_url=database_url,
        host=env.get("HOST", "0.0.0.0"),
        port=port,
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        max_body_bytes=max_body_bytes,
        expose_error_details=expose,
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
        sql_echo=sql_echo,
    )
