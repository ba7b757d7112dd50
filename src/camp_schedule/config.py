"""Schedule loader configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings

PUBLISHED_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vQ1bJZStcSuvw7DYlV4rAdTd1iKQiwdcumhndixeaEiQSyNKhxfAD2gfu4kWUzMyhH-Wwc0-LE6-Xt9"
    "/pub?output=csv"
)


class ScheduleConfig(BaseSettings):
    """Schedule loader configuration loaded from environment variables.

    Settings are loaded from environment variables with sensible defaults.
    For local development, create a .env file in the project root.
    """

    # Published sheet (CSV export, no authentication)
    schedule_csv_url: str = Field(
        default=PUBLISHED_CSV_URL,
        description="Published spreadsheet CSV export URL",
    )

    # Fetch settings
    request_timeout: float = Field(
        default=10.0,
        description="HTTP timeout in seconds for the CSV fetch",
    )
    fetch_attempts: int = Field(
        default=3,
        description="Maximum fetch attempts on transient failures",
    )
    fetch_retry_wait: float = Field(
        default=2.0,
        description="Seconds to wait between fetch attempts",
    )
    fallback_delay: float = Field(
        default=1.0,
        description="Seconds to wait before substituting the sample schedule",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton pattern
_config: ScheduleConfig | None = None


def get_config() -> ScheduleConfig:
    """Get the schedule configuration singleton.

    Returns:
        ScheduleConfig: Schedule configuration instance
    """
    global _config
    if _config is None:
        _config = ScheduleConfig()
    return _config
