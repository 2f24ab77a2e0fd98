"""Configuration system for seq-sampler.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (SEQ_SAMPLER_*) -> .env file -> field defaults.

Per-call overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults. Infrastructure fields
(which variate source to build, its seed and fallback) are protected from
per-call override.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from seq_sampler.exceptions import ConfigValidationError

# Fields that can be overridden per call, e.g. random_sample(..., alpha_inverse=20).
_PER_CALL_FIELDS: frozenset[str] = frozenset(
    {
        "alpha_inverse",
        "strict_length",
        "log_level",
        "diagnostic_mode",
    }
)

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class SamplerConfig(BaseSettings):
    """Configuration for seq-sampler.

    Resolution order: init kwargs -> env vars (SEQ_SAMPLER_*) -> .env file -> defaults.

    Fields are divided into two groups:
    - **Infrastructure**: variate source selection, seed, entropy pool and
      fallback. Used once to build the ambient source, NOT overridable per call.
    - **Sampling parameters**: mode-switch threshold, length checking and
      logging. Overridable per call.
    """

    model_config = SettingsConfigDict(
        env_prefix="SEQ_SAMPLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Variate source (NOT per-call overridable) ---

    variate_source_type: str = Field(
        default="numpy",
        description="Registered uniform variate source: 'numpy', 'system', 'entropy_pool'",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for seedable sources (None = fresh OS entropy)",
    )
    entropy_pool_path: str = Field(
        default="",
        description="File of recorded random bytes for the 'entropy_pool' source",
    )
    fallback_mode: str = Field(
        default="system",
        description="Fallback when the primary source runs dry: 'error', 'system', 'numpy'",
    )

    # --- Sampling (per-call overridable) ---

    alpha_inverse: int = Field(
        default=13,
        ge=2,
        description="Use Algorithm A once alpha_inverse * to_select > available (Vitter: 13)",
    )
    strict_length: bool = Field(
        default=True,
        description="Reject sized populations holding fewer than `total` elements",
    )

    # --- Logging (per-call overridable) ---

    log_level: Literal["none", "summary", "full"] = Field(
        default="none",
        description="Per-selection logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all selection records in memory for analysis",
    )


# Populate _ALL_FIELDS now that the class is defined.
_ALL_FIELDS = frozenset(SamplerConfig.model_fields.keys())


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Validate per-call override keys without creating a config.

    Args:
        overrides: Mapping of config field names to new values.

    Raises:
        ConfigValidationError: If any key is unknown or non-overridable.
    """
    for key in overrides:
        if key not in _ALL_FIELDS:
            raise ConfigValidationError(f"Unknown config field: '{key}'")
        if key not in _PER_CALL_FIELDS:
            raise ConfigValidationError(
                f"Field '{key}' is an infrastructure field and cannot be "
                f"overridden per call"
            )


def resolve_config(
    defaults: SamplerConfig,
    overrides: dict[str, Any] | None,
) -> SamplerConfig:
    """Create a new config instance merging defaults with per-call overrides.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Per-call overrides keyed by field name.

    Returns:
        *defaults* itself when there is nothing to override, otherwise a new
        validated SamplerConfig.

    Raises:
        ConfigValidationError: If any key is unknown or non-overridable, or
            if a value fails validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    # model_copy(update=...) skips validation, so "20" would not be coerced
    # to 20 and alpha_inverse=1 would slip through. model_validate runs the
    # full validator.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        return SamplerConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


@lru_cache(maxsize=1)
def get_default_config() -> SamplerConfig:
    """Return the environment-derived config, loaded once per process.

    Call ``get_default_config.cache_clear()`` to reload after the
    environment changes.
    """
    return SamplerConfig()
