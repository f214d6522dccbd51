# config/settings.py
import os
import sys
from typing import List
from dotenv import load_dotenv
from pydantic import ValidationError, Field
from pydantic_settings import BaseSettings
from util.constants import AUTOCOMPLETE_PAGE_SIZE
from util.enums import Environment


if os.getenv("APP_ENV", Environment.DEV) == Environment.DEV:
    load_dotenv()


class Settings(BaseSettings):
    # App
    APP_ENV: str = Field(default=Environment.DEV.value, validation_alias="APP_ENV")
    REDIS_URL: str = Field(..., validation_alias="REDIS_URL")

    # CORS & Limits
    ALLOWED_ORIGIN: str = Field(default="*", validation_alias="ALLOWED_ORIGIN")
    RATE_LIMIT_TIMES: int = Field(default=30, validation_alias="RATE_LIMIT_TIMES")
    RATE_LIMIT_SECONDS: int = Field(default=60, validation_alias="RATE_LIMIT_SECONDS")
    TRUST_PROXY: bool = Field(default=False, validation_alias="TRUST_PROXY")

    # Discord delivery
    DISCORD_TOKEN: str = Field(..., validation_alias="DISCORD_TOKEN")
    DISCORD_API_URL: str = "https://discord.com/api/v10"
    NOTIFY_TIMEOUT_SECONDS: float = Field(
        default=10.0, validation_alias="NOTIFY_TIMEOUT_SECONDS"
    )

    # Claim lifecycle
    CLAIM_DURATION_DAYS: int = Field(default=1, ge=1, validation_alias="CLAIM_DURATION_DAYS")
    SWEEP_INTERVAL_SECONDS: int = Field(
        default=30 * 60, ge=1, validation_alias="SWEEP_INTERVAL_SECONDS"
    )
    AUTOCOMPLETE_LIMIT: int = Field(
        default=AUTOCOMPLETE_PAGE_SIZE, ge=1, validation_alias="AUTOCOMPLETE_LIMIT"
    )
    SEED_FILENAMES: List[str] = Field(
        default=["file1.txt", "file2.txt", "file3.txt"],
        validation_alias="SEED_FILENAMES",
    )

    # Logging knobs
    LOGGER_NAME: str = "filelock"
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    LOG_TO_FILE: bool = Field(default=False, validation_alias="LOG_TO_FILE")
    LOG_DIR: str = Field(default="logs", validation_alias="LOG_DIR")
    LOG_FILE_NAME: str = Field(default="app.log", validation_alias="LOG_FILE_NAME")
    LOG_MAX_BYTES: int = Field(
        default=10 * 1024 * 1024, validation_alias="LOG_MAX_BYTES"
    )
    LOG_BACKUP_COUNT: int = Field(default=5, validation_alias="LOG_BACKUP_COUNT")


try:
    settings = Settings()
except ValidationError as e:
    print("❌ Missing/invalid environment variables:", file=sys.stderr)
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", []))
        msg = err.get("msg", "")
        print(f" - {loc}: {msg}", file=sys.stderr)
    sys.exit(1)
except Exception as e:
    print(f"❌ Settings initialization failed: {e}", file=sys.stderr)
    sys.exit(1)
