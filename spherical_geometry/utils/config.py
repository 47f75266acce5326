"""
Configuration management using Pydantic for validation.

Applications that model a sphere other than Earth's mean sphere, or that use
a proximity tolerance other than the default, keep those values in a YAML
file. The geometry functions never read configuration themselves: pass
``config.earth_radius`` and ``config.tolerance`` explicitly.
"""
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from spherical_geometry.core.mathutil import EARTH_RADIUS
from spherical_geometry.core.poly import DEFAULT_TOLERANCE
from spherical_geometry.utils.exceptions import ConfigurationError
from spherical_geometry.utils.logging_config import get_logger


class GeometryConfig(BaseModel):
    """Parameters for distance, area and proximity computations."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    earth_radius: float = Field(EARTH_RADIUS, gt=0.0, description="Sphere radius (meters)")
    tolerance: float = Field(DEFAULT_TOLERANCE, ge=0.0, description="Proximity tolerance for edge/path tests (meters)")
    geodesic: bool = Field(True, description="Great-circle segments if True, rhumb segments otherwise")


def load_config(config_path: Union[str, Path]) -> GeometryConfig:
    """
    Load and validate configuration from a YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Validated GeometryConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigurationError: If the YAML is malformed or fails validation

    Example:
        >>> config = load_config(Path("config/geofence.yaml"))
        >>> compute_distance_between(a, b, radius=config.earth_radius)
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r') as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Malformed YAML in {config_path}", details={'reason': str(e)}
        ) from e

    if config_dict is None:
        config_dict = {}
    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Config root must be a mapping: {config_path}",
            details={'type': type(config_dict).__name__}
        )

    try:
        config = GeometryConfig(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {config_path}",
            details={'errors': e.error_count(), 'reason': str(e)}
        ) from e

    get_logger(__name__).info(
        "Configuration loaded",
        config_file=str(config_path),
        earth_radius=config.earth_radius,
        tolerance=config.tolerance,
        geodesic=config.geodesic,
    )
    return config


def get_default_config() -> GeometryConfig:
    """
    Get default configuration.

    Returns:
        GeometryConfig with Earth's mean radius and the default tolerance
    """
    return GeometryConfig()
