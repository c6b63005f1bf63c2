"""Application configuration via Pydantic Settings.

NOTE: the default unit is read from GEODISTANCE_DEFAULT_UNIT and validated by
the calculator like any caller-supplied unit.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Calculator
    default_unit: str = Field(default="mi", validation_alias="GEODISTANCE_DEFAULT_UNIT")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
