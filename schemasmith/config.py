"""Configuration for schemasmith.

``DatabaseSettings`` is passed explicitly to ``Database``; nothing in the
library reads the environment on its own. ``load_settings`` is a convenience
for callers that keep their connection details in environment variables or a
``.env`` file.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "SCHEMASMITH_"


class DatabaseSettings(BaseModel):
    """Connection settings for one database."""

    url: str = Field(description="SQLAlchemy URL of the target database")
    master_url: str | None = Field(
        default=None,
        description=(
            "URL of the administrative database used to create and drop the "
            "target database; derived from url when omitted"
        ),
    )
    database_name: str | None = Field(
        default=None,
        description="Name of the target database; taken from url when omitted",
    )
    echo: bool = Field(default=False, description="Echo SQL through SQLAlchemy")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("url")
    @classmethod
    def url_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("url cannot be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()


def load_settings() -> DatabaseSettings:
    """Load settings from ``SCHEMASMITH_*`` environment variables.

    Raises:
        KeyError: If ``SCHEMASMITH_DATABASE_URL`` is not set
    """
    load_dotenv()

    echo = os.getenv(f"{ENV_PREFIX}ECHO", "false").lower() in ["true", "1", "yes", "on"]

    return DatabaseSettings(
        url=os.environ[f"{ENV_PREFIX}DATABASE_URL"],
        master_url=os.getenv(f"{ENV_PREFIX}MASTER_URL"),
        database_name=os.getenv(f"{ENV_PREFIX}DATABASE_NAME"),
        echo=echo,
        log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO"),
    )
