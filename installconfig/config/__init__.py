"""Install config data model, defaults, and validation."""

from installconfig.config.defaults import DEFAULTS, SCHEMA_VERSION, InstallDefaults
from installconfig.config.models import (
    PLATFORM_NAMES,
    AWSPlatform,
    ClusterMetadata,
    ClusterNetwork,
    InstallConfig,
    LibvirtNetwork,
    LibvirtPlatform,
    MachinePool,
    Networking,
    NonePlatform,
    OpenStackPlatform,
    Platform,
    default_machine_pools,
)
from installconfig.config.validation import is_valid, validate_install_config

__all__ = [
    "AWSPlatform",
    "ClusterMetadata",
    "ClusterNetwork",
    "DEFAULTS",
    "InstallConfig",
    "InstallDefaults",
    "LibvirtNetwork",
    "LibvirtPlatform",
    "MachinePool",
    "Networking",
    "NonePlatform",
    "OpenStackPlatform",
    "PLATFORM_NAMES",
    "Platform",
    "SCHEMA_VERSION",
    "default_machine_pools",
    "is_valid",
    "validate_install_config",
]
