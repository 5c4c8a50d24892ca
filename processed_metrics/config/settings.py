"""Runtime settings for the processed metrics filter."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProcessedMetricsSettings(BaseSettings):
    """Rounding and pruning defaults applied by ``MetricsFilter``.

    Each field can be overridden with a ``PROCESSED_METRICS_<FIELD>`` env var.
    """

    model_config = SettingsConfigDict(env_prefix="PROCESSED_METRICS_")

    round_precision: int = Field(default=2, ge=0)
    invalid_division: float = 0
    delete_rows_with_no_visit: bool = True


def load_settings() -> ProcessedMetricsSettings:
    return ProcessedMetricsSettings()
