"""Runtime configuration for Horse Equipment."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENGINE_VERSION = "1.0.0"


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="HORSE_EQUIPMENT_", env_file=".env", extra="ignore")

    app_name: str = "horse-equipment"
    log_level: str = "INFO"
    config_path: str = Field(
        default="config/HorseEquipment.json",
        description="Location of the persisted equipment configuration document.",
    )
    rng_seed: int | None = Field(default=None, description="Seed for reproducible rolls; unseeded when unset.")
    batch_delay_seconds: float = Field(
        default=0.01,
        gt=0,
        description="Pause between entities during the startup sweep.",
    )


settings = Settings()
