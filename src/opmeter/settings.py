"""Process-wide meter defaults.

Read from the environment with the ``OPMETER_`` prefix:
- OPMETER_RATE_INTERVAL_SECONDS: minimum rate window, seconds (default 0.5)
- OPMETER_DEFAULT_UNIT: unit attached to new aggregate meters (default "")
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class MeterSettings(BaseSettings):
    """Defaults applied when a meter is built without explicit options."""

    rate_interval_seconds: float = Field(
        default=0.5,
        gt=0,
        description="Minimum window length before a rate meter publishes a new rate",
    )
    default_unit: str = Field(
        default="",
        description="Display unit for aggregate meters built without one",
    )

    model_config = {"env_prefix": "OPMETER_"}


@lru_cache(maxsize=1)
def get_settings() -> MeterSettings:
    return MeterSettings()
