"""Runtime configuration via environment variables.

Uses pydantic-settings so every field can be overridden with an env var
(``LOG_LEVEL``, ``SIM_SCENARIO``, ...).  CLI flags take precedence over
both.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class RemoteStatsSettings(BaseSettings):
    """Remote Stats runtime settings."""

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}

    # -- simulation ---------------------------------------------------------
    sim_scenario: str = Field(
        default="diesel_nominal",
        description="Scenario name (from locomotive_scenarios.json)",
    )

    # -- cycling ------------------------------------------------------------
    cycle_steps: int = Field(
        default=4,
        ge=0,
        description="Number of cycle events the demo issues after pairing",
    )
    cycle_delta: int = Field(
        default=1,
        description="Selection step per cycle event (may be negative)",
    )

    # -- logging ------------------------------------------------------------
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="console",
        description="Log output format: 'console' or 'json'",
    )
