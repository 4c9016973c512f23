from typing import Annotated

import annotated_types
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .dto.policy import PolicyConfiguration
from .generator import DEFAULT_MAX_ATTEMPTS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="PWD_POLICY_",
        env_nested_delimiter="__",
    )

    policy: PolicyConfiguration = Field(default_factory=PolicyConfiguration)
    max_attempts: Annotated[int, annotated_types.Ge(0)] = DEFAULT_MAX_ATTEMPTS

    @classmethod
    def settings_customise_sources(
        cls,
        _: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, file_secret_settings, init_settings
