from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_TRUTHY_VALUES = frozenset({"true", "1", "yes"})


def parse_read_only_flag(value: object) -> bool:
    """Interpret a raw read-only flag; anything unrecognised is ``False``."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUTHY_VALUES


class TeamsMcpSettings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True,
        extra="ignore",
    )

    read_only: bool = Field(default=False, validation_alias="TEAMS_MCP_READ_ONLY")

    @field_validator("read_only", mode="before")
    @classmethod
    def validate_read_only(cls, value: object) -> bool:
        return parse_read_only_flag(value)
