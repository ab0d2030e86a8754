"""Engine settings loaded from environment variables / .env file."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TRIPWISE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Travel time estimate
    walking_speed_kmh: float = Field(default=5.0, gt=0.0)

    # Accepted milestone count per optimisation call
    min_milestones: int = Field(default=2, ge=2)
    max_milestones: int = Field(default=10, ge=2)

    # Feasibility thresholds used by the route validator
    max_total_distance_km: float = Field(default=20.0, ge=0.0)
    max_total_time_minutes: float = Field(default=480, ge=0)
    max_segment_distance_km: float = Field(default=5.0, ge=0.0)

    # Upper bound on full 2-opt sweeps
    max_two_opt_sweeps: int = Field(default=1000, ge=1)

    @model_validator(mode="after")
    def _check_milestone_limits(self) -> "Settings":
        if self.max_milestones < self.min_milestones:
            raise ValueError(
                f"max_milestones ({self.max_milestones}) is below min_milestones ({self.min_milestones})"
            )
        return self


settings = Settings()
