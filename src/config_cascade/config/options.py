"""Resolution options and their defaults."""
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


DEFAULT_DATABASE_URL_ENV_KEY = "DATABASE_URL"
DEFAULT_DATABASE_KEY = "database"
DEFAULT_ENVIRONMENT_ENV_KEY = "NODE_ENV"
DEFAULT_ENVIRONMENT = "develop"
LOCAL_DIRECTORY = "local"


class ResolutionOptions(BaseModel):
    """Options controlling one configuration resolution.

    Empty strings are treated as unset and fall back to the defaults.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    config_directory: Path = Field(
        default_factory=Path.cwd,
        description="Base config directory containing files and environment subdirectories",
    )
    include_root_index: bool = Field(
        default=False,
        description="Load the base directory's index file as well",
    )
    database_url_env_key: str = Field(
        default=DEFAULT_DATABASE_URL_ENV_KEY,
        description="Environment variable holding the database connection string",
    )
    database_key: str = Field(
        default=DEFAULT_DATABASE_KEY,
        description="Config key receiving the parsed connection string",
    )
    environment_env_key: str = Field(
        default=DEFAULT_ENVIRONMENT_ENV_KEY,
        description="Environment variable selecting the environment subdirectory",
    )
    default_environment: str = Field(
        default=DEFAULT_ENVIRONMENT,
        description="Environment name used when the selector variable is unset or empty",
    )

    @field_validator("config_directory", mode="before")
    @classmethod
    def validate_config_directory(cls, v: Any) -> Path:
        """Resolve the config directory to an absolute path."""
        if v is None or v == "":
            return Path.cwd()
        return Path(v).resolve()

    @field_validator(
        "database_url_env_key",
        "database_key",
        "environment_env_key",
        "default_environment",
        mode="before",
    )
    @classmethod
    def validate_non_empty(cls, v: Any, info: ValidationInfo) -> Any:
        """Replace empty values with the field default."""
        if v is None or v == "":
            return cls.model_fields[info.field_name].default
        return v
