"""Engine configuration for pyflota."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any

from pyflota._constants import BASE_LATITUDE, BASE_LONGITUDE, FLEET_SEED, FLEET_SIZE
from pyflota.catalogs import DEFAULT_CATALOGS, Catalogs
from pyflota.exceptions import FlotaConfigError


def _env_float(env: Mapping[str, str], key: str, field_name: str) -> float | None:
    value = env.get(key)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        raise FlotaConfigError(f"{key} must be a number, got {value!r}", field=field_name) from None


def _env_int(env: Mapping[str, str], key: str, field_name: str) -> int | None:
    value = env.get(key)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise FlotaConfigError(f"{key} must be an integer, got {value!r}", field=field_name) from None


@dataclasses.dataclass(frozen=True)
class FlotaConfig:
    """Engine configuration.

    Distribution constants (status split, geofence weighting, lifecycle
    durations) are fixed and deliberately absent here.

    Parameters
    ----------
    base_latitude : float
        Latitude that free-floating positions are offset from.
        Defaults to central Guadalajara.
    base_longitude : float
        Longitude counterpart of ``base_latitude``.
    fleet_size : int
        Number of vehicles in the synthesized roster.
    fleet_seed : int
        Seed shared by all roster draws.
    catalogs : Catalogs
        Template, tag, assignee, street and geofence catalogs.
    """

    base_latitude: float = BASE_LATITUDE
    base_longitude: float = BASE_LONGITUDE
    fleet_size: int = FLEET_SIZE
    fleet_seed: int = FLEET_SEED
    catalogs: Catalogs = dataclasses.field(default_factory=lambda: DEFAULT_CATALOGS)

    def __post_init__(self) -> None:
        if not -90.0 <= self.base_latitude <= 90.0:
            raise FlotaConfigError(
                f"base_latitude must be between -90 and 90, got {self.base_latitude}",
                field="base_latitude",
            )
        if not -180.0 <= self.base_longitude <= 180.0:
            raise FlotaConfigError(
                f"base_longitude must be between -180 and 180, got {self.base_longitude}",
                field="base_longitude",
            )
        if self.fleet_size < 0:
            raise FlotaConfigError(f"fleet_size must be non-negative, got {self.fleet_size}", field="fleet_size")

    @property
    def base_position(self) -> tuple[float, float]:
        return (self.base_latitude, self.base_longitude)

    @classmethod
    def from_env(cls, **overrides: Any) -> FlotaConfig:
        """Create configuration from environment variables.

        Reads ``FLOTA_BASE_LATITUDE``, ``FLOTA_BASE_LONGITUDE``,
        ``FLOTA_FLEET_SIZE`` and ``FLOTA_FLEET_SEED``.  Explicit keyword
        arguments override environment values.

        Raises
        ------
        FlotaConfigError
            If a variable is set but not numeric.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        _ENV_FLOAT_MAP = {
            "FLOTA_BASE_LATITUDE": "base_latitude",
            "FLOTA_BASE_LONGITUDE": "base_longitude",
        }
        for env_key, field_name in _ENV_FLOAT_MAP.items():
            if field_name in overrides:
                continue
            parsed_float = _env_float(env, env_key, field_name)
            if parsed_float is not None:
                config_kwargs[field_name] = parsed_float

        _ENV_INT_MAP = {
            "FLOTA_FLEET_SIZE": "fleet_size",
            "FLOTA_FLEET_SEED": "fleet_seed",
        }
        for env_key, field_name in _ENV_INT_MAP.items():
            if field_name in overrides:
                continue
            parsed_int = _env_int(env, env_key, field_name)
            if parsed_int is not None:
                config_kwargs[field_name] = parsed_int

        config_kwargs.update(overrides)

        return cls(**config_kwargs)


DEFAULT_CONFIG = FlotaConfig()
