from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Formatting settings
    default_template: str = "{0}°{1}′{2}″ {3}"
    number_precision: int = 7  # fractional digits for format('number')

    # Logging settings
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_format: Literal["standard", "structured"] = "standard"

    model_config = SettingsConfigDict(env_prefix="GEOCOORD_", env_file=".env", extra="ignore")

settings = Settings()
