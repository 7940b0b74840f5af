import os
from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic.functional_validators import BeforeValidator

__all__ = ["Settings", "settings"]

ENV_PREFIX = "MIMIC_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _upper(value):
    return value.strip().upper() if isinstance(value, str) else value


def _lower(value):
    return value.strip().lower() if isinstance(value, str) else value


class Settings(BaseModel):
    LOG_LEVEL: Annotated[LogLevel, BeforeValidator(_upper)] = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"
    LOG_STREAM: Annotated[
        Literal["stdout", "stderr"], BeforeValidator(_lower)
    ] = Field("stdout", description="Stream the project log handler writes to.")

    @classmethod
    def load(cls) -> "Settings":
        values = {}
        for field in cls.model_fields:
            env_value = os.getenv(f"{ENV_PREFIX}{field}")
            if env_value is not None:
                values[field] = env_value

        # Honour the generic LOG_LEVEL when no prefixed one is set
        if "LOG_LEVEL" not in values and os.getenv("LOG_LEVEL"):
            values["LOG_LEVEL"] = os.environ["LOG_LEVEL"]

        return cls(**values)


settings = Settings.load()
