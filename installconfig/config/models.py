"""Pydantic models for the install config document.

Mirrors the on-disk YAML shape::

    apiVersion: v1beta1
    metadata:
      name: test-cluster
    baseDomain: example.com
    sshKey: ssh-ed25519 AAAA...
    networking:
      machineCIDR: 10.0.0.0/16
      type: OpenshiftSDN
      serviceCIDR: 172.30.0.0/16
      clusterNetworks:
      - cidr: 10.128.0.0/14
        hostSubnetLength: 9
    machines:
    - name: master
      replicas: 3
    - name: worker
      replicas: 3
    platform:
      aws:
        region: us-east-1
    pullSecret: '{"auths": ...}'

Fields omitted from a document are filled from
:data:`~installconfig.config.defaults.DEFAULTS`.
"""

from __future__ import annotations

from ipaddress import ip_network
from types import MappingProxyType
from typing import Annotated, Any, Dict, Literal, Mapping, Optional, Tuple, Union

import yaml
from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    IPvAnyNetwork,
    field_serializer,
    field_validator,
    model_serializer,
    model_validator,
)

from installconfig.config.defaults import DEFAULTS, InstallDefaults

_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


def _network(value: Any) -> Any:
    # Host bits are allowed and masked off: 10.0.0.1/16 -> 10.0.0.0/16.
    if isinstance(value, str):
        return ip_network(value, strict=False)
    return value


Cidr = Annotated[IPvAnyNetwork, BeforeValidator(_network)]


# ---------------------------------------------------------------------------
# Networking
# ---------------------------------------------------------------------------


class ClusterNetwork(BaseModel):
    """A pod network range and the prefix bits handed to each host."""

    model_config = _MODEL_CONFIG

    cidr: Cidr
    host_subnet_length: int = Field(alias="hostSubnetLength", ge=0)


class Networking(BaseModel):
    """Cluster network layout.  Any field left out falls back to the defaults."""

    model_config = _MODEL_CONFIG

    machine_cidr: Cidr = Field(
        default_factory=lambda: DEFAULTS.machine_cidr,
        alias="machineCIDR",
        validate_default=True,
    )
    type: str = Field(default_factory=lambda: DEFAULTS.network_type)
    service_cidr: Cidr = Field(
        default_factory=lambda: DEFAULTS.service_cidr,
        alias="serviceCIDR",
        validate_default=True,
    )
    cluster_networks: Tuple[ClusterNetwork, ...] = Field(
        default_factory=lambda: _default_cluster_networks(DEFAULTS),
        alias="clusterNetworks",
    )

    @classmethod
    def from_defaults(cls, defaults: InstallDefaults = DEFAULTS) -> "Networking":
        """Build the networking block entirely from *defaults*."""
        return cls(
            machine_cidr=defaults.machine_cidr,
            type=defaults.network_type,
            service_cidr=defaults.service_cidr,
            cluster_networks=_default_cluster_networks(defaults),
        )


def _default_cluster_networks(defaults: InstallDefaults) -> Tuple[ClusterNetwork, ...]:
    return (
        ClusterNetwork(
            cidr=defaults.cluster_network_cidr,
            host_subnet_length=defaults.host_subnet_length,
        ),
    )


# ---------------------------------------------------------------------------
# Machine pools
# ---------------------------------------------------------------------------


class MachinePool(BaseModel):
    """A named group of machines.

    ``replicas`` is ``None`` when unset, which is different from an
    explicit ``0``.
    """

    model_config = _MODEL_CONFIG

    name: str
    replicas: Optional[int] = Field(default=None, ge=0)


def default_machine_pools(defaults: InstallDefaults = DEFAULTS) -> Tuple[MachinePool, ...]:
    """Return one pool per default role, each with the default replica count."""
    return tuple(
        MachinePool(name=name, replicas=defaults.replicas)
        for name in defaults.pool_names
    )


# ---------------------------------------------------------------------------
# Platform variants
# ---------------------------------------------------------------------------


class AWSPlatform(BaseModel):
    """Amazon Web Services."""

    model_config = _MODEL_CONFIG

    kind: Literal["aws"] = Field(default="aws", exclude=True)
    region: str
    user_tags: Mapping[str, str] = Field(
        default_factory=dict, alias="userTags", validate_default=True
    )

    @field_validator("user_tags")
    @classmethod
    def _read_only_tags(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("user_tags")
    def _tags_to_dict(self, value: Mapping[str, str]) -> Dict[str, str]:
        return dict(value)


class LibvirtNetwork(BaseModel):
    model_config = _MODEL_CONFIG

    name: str = "tectonic"
    if_name: str = Field(default="tt0", alias="if")
    ip_range: str = Field(default="192.168.126.0/24", alias="ipRange")


class LibvirtPlatform(BaseModel):
    """Local libvirt/KVM hypervisor."""

    model_config = _MODEL_CONFIG

    kind: Literal["libvirt"] = Field(default="libvirt", exclude=True)
    uri: str = Field(default="qemu+tcp://192.168.122.1/system", alias="URI")
    network: LibvirtNetwork = Field(default_factory=LibvirtNetwork)


class OpenStackPlatform(BaseModel):
    """OpenStack cloud."""

    model_config = _MODEL_CONFIG

    kind: Literal["openstack"] = Field(default="openstack", exclude=True)
    region: str
    cloud: str = ""
    external_network: str = Field(default="", alias="externalNetwork")
    base_image: str = Field(default="", alias="baseImage")


class NonePlatform(BaseModel):
    """No platform integration; carries no fields."""

    model_config = _MODEL_CONFIG

    kind: Literal["none"] = Field(default="none", exclude=True)


PlatformVariant = Annotated[
    Union[AWSPlatform, LibvirtPlatform, OpenStackPlatform, NonePlatform],
    Field(discriminator="kind"),
]

PLATFORM_NAMES = ("aws", "libvirt", "none", "openstack")


class Platform(BaseModel):
    """Tagged union holding exactly one platform variant.

    Documents spell it as a mapping with a single key naming the variant
    (``{"aws": {"region": "us-east-1"}}``); a key with a null payload does
    not count.  When zero, several or unknown keys are given, ``variant``
    stays ``None`` and ``problem`` says why, for the validator to report
    in its own order.
    """

    model_config = ConfigDict(frozen=True)

    variant: Optional[PlatformVariant] = None
    problem: str = ""

    @model_validator(mode="before")
    @classmethod
    def _from_document(cls, data: Any) -> Any:
        if not isinstance(data, dict) or isinstance(data.get("variant"), BaseModel):
            return data
        expected = ", ".join(PLATFORM_NAMES)
        populated = {key: value for key, value in data.items() if value is not None}
        if not populated:
            return {"problem": f"platform must specify exactly one of: {expected}"}
        unknown = sorted(str(key) for key in populated if key not in PLATFORM_NAMES)
        if unknown:
            return {
                "problem": f"unknown platform {unknown[0]!r}, expected one of: {expected}"
            }
        if len(populated) > 1:
            return {
                "problem": "platform must specify exactly one variant, got: "
                + ", ".join(sorted(populated))
            }
        name, payload = next(iter(populated.items()))
        if isinstance(payload, dict):
            payload = {**payload, "kind": name}
        return {"variant": payload}

    @model_serializer
    def _to_document(self) -> Dict[str, Any]:
        if self.variant is None:
            return {}
        return {self.name: self.variant.model_dump(mode="json", by_alias=True)}

    @classmethod
    def of(
        cls,
        variant: Union[AWSPlatform, LibvirtPlatform, OpenStackPlatform, NonePlatform],
    ) -> "Platform":
        """Wrap a single variant."""
        return cls(variant=variant)

    @property
    def name(self) -> str:
        """Discriminant, e.g. ``aws`` or ``none``; empty without a variant."""
        return self.variant.kind if self.variant is not None else ""


# ---------------------------------------------------------------------------
# InstallConfig (document root)
# ---------------------------------------------------------------------------


class ClusterMetadata(BaseModel):
    model_config = _MODEL_CONFIG

    name: str = ""


class InstallConfig(BaseModel):
    """Root of the install config document.

    Instances are frozen, and their collections are tuples or read-only
    mappings.  Required-ness of the string fields and the platform is
    enforced by
    :func:`~installconfig.config.validation.validate_install_config` rather
    than by the model, so a document with empty values still parses.
    """

    model_config = _MODEL_CONFIG

    api_version: str = Field(default="", alias="apiVersion")
    metadata: ClusterMetadata = Field(default_factory=ClusterMetadata)
    base_domain: str = Field(default="", alias="baseDomain")
    ssh_key: str = Field(default="", alias="sshKey")
    networking: Networking = Field(default_factory=lambda: Networking.from_defaults())
    machines: Tuple[MachinePool, ...] = Field(
        default_factory=lambda: default_machine_pools()
    )
    platform: Optional[Platform] = None
    pull_secret: str = Field(default="", alias="pullSecret")

    @property
    def name(self) -> str:
        """Cluster name (``metadata.name``)."""
        return self.metadata.name

    def to_document(self) -> Dict[str, Any]:
        """Return the aliased, JSON-compatible mapping written to disk.

        Unset values (``None``) are dropped.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_yaml(self) -> str:
        """Serialise to YAML, preserving document field order."""
        return yaml.safe_dump(self.to_document(), sort_keys=False)
