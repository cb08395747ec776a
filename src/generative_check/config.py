"""Run settings for the trial runner, shrink engine and reporter.

Settings can be given explicitly or read from ``GENERATIVE_CHECK_*``
environment variables:

- ``GENERATIVE_CHECK_TRIALS``: number of trials per check (default 100).
- ``GENERATIVE_CHECK_MAX_SHRINKS``: cap on committed shrink steps
  (default: unbounded).
- ``GENERATIVE_CHECK_SEED``: seed for the default random source
  (default: wall clock).
- ``GENERATIVE_CHECK_PROGRESS_MARKER``: character written per passing
  test (default ``.``).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from generative_check.core.errors import GenerativeCheckValidationError

ENV_PREFIX = "GENERATIVE_CHECK_"

_ENV_FIELDS: dict[str, str] = {
    "TRIALS": "trial_count",
    "MAX_SHRINKS": "max_shrinks",
    "SEED": "seed",
    "PROGRESS_MARKER": "progress_marker",
}


class CheckSettings(BaseModel):
    """Validated, immutable run settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    trial_count: int = Field(default=100, ge=0)
    max_shrinks: int | None = Field(default=None, ge=0)
    seed: int | None = None
    progress_marker: str = Field(default=".", min_length=1, max_length=1)


def settings_from_env(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Collect raw setting values from the environment.

    Empty variables are ignored.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        Dict of field name to raw string value.
    """
    env = os.environ if environ is None else environ
    values: dict[str, str] = {}
    for suffix, field_name in _ENV_FIELDS.items():
        raw = env.get(f"{ENV_PREFIX}{suffix}", "").strip()
        if raw:
            values[field_name] = raw
    return values


def load_seed(environ: Mapping[str, str] | None = None) -> int | None:
    """Read and validate only ``GENERATIVE_CHECK_SEED``.

    Other ``GENERATIVE_CHECK_*`` variables are not looked at.

    Raises:
        GenerativeCheckValidationError: If the seed is not an integer.
    """
    raw = settings_from_env(environ).get("seed")
    if raw is None:
        return None
    try:
        return CheckSettings.model_validate({"seed": raw}).seed
    except ValidationError as e:
        raise GenerativeCheckValidationError.from_validation_error(
            e, context={"source": "settings"}
        ) from e


def load_settings(environ: Mapping[str, str] | None = None, **overrides: Any) -> CheckSettings:
    """Build CheckSettings from the environment plus explicit overrides.

    Overrides win over environment values.

    Raises:
        GenerativeCheckValidationError: If a value fails validation.
    """
    values: dict[str, Any] = {**settings_from_env(environ), **overrides}
    try:
        return CheckSettings.model_validate(values)
    except ValidationError as e:
        raise GenerativeCheckValidationError.from_validation_error(
            e, context={"source": "settings"}
        ) from e
