"""Runtime configuration for the profile scraper."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ScraperConfig(BaseModel):
    """Options controlling a scrape run."""

    progress: bool = True
    strip_redundancy: bool = True

    # Politeness delay before every request, in seconds
    delay_min: float = Field(default=5.0, ge=0)
    delay_max: float = Field(default=10.0, ge=0)

    timeout: float = Field(default=30.0, gt=0)
    user_agent: str = "eliteprospects-scraper/0.1"

    # "abort" raises on the first failing player, "skip" drops it
    on_error: Literal["abort", "skip"] = "abort"
    # "empty" treats a missing stats table as zero seasons
    missing_table: Literal["empty", "error"] = "empty"

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_delay_range(self) -> "ScraperConfig":
        if self.delay_max < self.delay_min:
            raise ValueError("delay_max must be greater than or equal to delay_min")
        return self
