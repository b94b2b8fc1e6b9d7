"""AWS helpers for the ``aws`` platform variant."""

from installconfig.aws.regions import (
    DEFAULT_REGION,
    REGION_ENV_VARS,
    known_regions,
    resolve_region,
    validate_region,
)

__all__ = [
    "DEFAULT_REGION",
    "REGION_ENV_VARS",
    "known_regions",
    "resolve_region",
    "validate_region",
]
