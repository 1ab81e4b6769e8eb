"""
Settings for cycle cut computation.

Values come from the environment (prefix CYCLECUT_) or a local .env file,
e.g. CYCLECUT_WORD_SIZE=16 or CYCLECUT_REDUCE_FLOW=true.
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CycleCutSettings(BaseSettings):
    """Defaults used when the caller does not pass explicit arguments."""

    # horizon = 2 * word_size
    word_size: int = 32

    # Cancel redundant feasible flow with a max-flow pass before decomposition
    reduce_flow: bool = False

    # Thread pool size for compute_cycle_cuts
    max_workers: int = 4

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CYCLECUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("word_size", "max_workers")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be a positive integer")
        return value
