"""AWS region resolution for the ``aws`` platform.

Region precedence (first non-empty wins):

1. ``OPENSHIFT_INSTALL_AWS_REGION``
2. ``AWS_DEFAULT_REGION`` / ``AWS_REGION``
3. Hardcoded fallback (``us-east-1``)

Known regions come from the endpoint data bundled with botocore, so no
network call is made.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Mapping, Optional, Tuple

import boto3

from installconfig.errors import InvalidInputError

logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-east-1"

REGION_ENV_VARS = ("OPENSHIFT_INSTALL_AWS_REGION", "AWS_DEFAULT_REGION", "AWS_REGION")


@lru_cache(maxsize=1)
def known_regions() -> Tuple[str, ...]:
    """Return the sorted EC2 regions of the standard ``aws`` partition."""
    session = boto3.Session()
    return tuple(sorted(session.get_available_regions("ec2")))


def validate_region(region: str) -> str:
    """Return *region* unchanged, or raise :class:`InvalidInputError`."""
    if not region:
        raise InvalidInputError("AWS region must not be empty")
    if region not in known_regions():
        raise InvalidInputError(
            f"unknown AWS region {region!r}; expected one of: "
            + ", ".join(known_regions())
        )
    return region


def resolve_region(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the AWS region from *environ* (default ``os.environ``), validated."""
    env = os.environ if environ is None else environ
    for var in REGION_ENV_VARS:
        value = env.get(var, "")
        if value:
            logger.debug("AWS region %s taken from %s", value, var)
            return validate_region(value)
    logger.debug("No AWS region in environment, using %s", DEFAULT_REGION)
    return DEFAULT_REGION
