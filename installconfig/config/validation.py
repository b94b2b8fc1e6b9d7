"""Invariant checks shared by the composer and the loader.

Checks run in a fixed order and stop at the first violation.
"""

from __future__ import annotations

import logging

from installconfig.config.models import InstallConfig
from installconfig.errors import ValidationError

logger = logging.getLogger(__name__)


def validate_install_config(config: InstallConfig) -> None:
    """Raise :class:`ValidationError` for the first violated invariant.

    Order: ``apiVersion``, ``metadata.name``, ``baseDomain``, ``platform``,
    ``pullSecret``.
    """
    if not config.api_version:
        raise ValidationError("apiVersion must not be empty")
    if not config.metadata.name:
        raise ValidationError("metadata.name must not be empty")
    if not config.base_domain:
        raise ValidationError("baseDomain must not be empty")
    if config.platform is None:
        raise ValidationError("platform must specify exactly one variant")
    if config.platform.variant is None:
        raise ValidationError(
            config.platform.problem or "platform must specify exactly one variant"
        )
    if not config.pull_secret:
        raise ValidationError("pullSecret must not be empty")
    logger.debug("Install config for %s passed validation", config.name)


def is_valid(config: InstallConfig) -> bool:
    """Return ``True`` when :func:`validate_install_config` accepts *config*."""
    try:
        validate_install_config(config)
    except ValidationError:
        return False
    return True
