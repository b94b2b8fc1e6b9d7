"""Inputs the install config is composed from, and the registry holding them.

The composer reads each input through a typed getter on a
:class:`DependencyRegistry`; a getter returns ``None`` when its input was
never resolved.  :class:`Parents` is the concrete registry, and
:func:`resolve_inputs` fills one from the process environment:

============================  ==============================================
Input                         Environment
============================  ==============================================
SSH public key                ``OPENSHIFT_INSTALL_SSH_PUB_KEY`` or the file at
                              ``OPENSHIFT_INSTALL_SSH_PUB_KEY_PATH``
                              (empty when neither is set)
Base domain                   ``OPENSHIFT_INSTALL_BASE_DOMAIN``
Cluster name                  ``OPENSHIFT_INSTALL_CLUSTER_NAME``
Pull secret                   ``OPENSHIFT_INSTALL_PULL_SECRET`` or the file at
                              ``OPENSHIFT_INSTALL_PULL_SECRET_PATH``
Platform                      ``OPENSHIFT_INSTALL_PLATFORM`` plus the
                              variant-specific variables below
============================  ==============================================

Set-but-malformed values raise :class:`~installconfig.errors.InvalidInputError`.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Protocol

from installconfig.aws.regions import resolve_region
from installconfig.config.models import (
    PLATFORM_NAMES,
    AWSPlatform,
    LibvirtPlatform,
    NonePlatform,
    OpenStackPlatform,
    Platform,
)
from installconfig.errors import InvalidInputError

logger = logging.getLogger(__name__)

SSH_KEY_ENV = "OPENSHIFT_INSTALL_SSH_PUB_KEY"
SSH_KEY_PATH_ENV = "OPENSHIFT_INSTALL_SSH_PUB_KEY_PATH"
BASE_DOMAIN_ENV = "OPENSHIFT_INSTALL_BASE_DOMAIN"
CLUSTER_NAME_ENV = "OPENSHIFT_INSTALL_CLUSTER_NAME"
PULL_SECRET_ENV = "OPENSHIFT_INSTALL_PULL_SECRET"
PULL_SECRET_PATH_ENV = "OPENSHIFT_INSTALL_PULL_SECRET_PATH"
PLATFORM_ENV = "OPENSHIFT_INSTALL_PLATFORM"
LIBVIRT_URI_ENV = "OPENSHIFT_INSTALL_LIBVIRT_URI"
OPENSTACK_REGION_ENV = "OPENSHIFT_INSTALL_OPENSTACK_REGION"
OPENSTACK_CLOUD_ENV = "OPENSHIFT_INSTALL_OPENSTACK_CLOUD"
OPENSTACK_EXTERNAL_NETWORK_ENV = "OPENSHIFT_INSTALL_OPENSTACK_EXTERNAL_NETWORK"
OPENSTACK_IMAGE_ENV = "OPENSHIFT_INSTALL_OPENSTACK_IMAGE"

_DNS_LABEL = r"[a-z0-9]([-a-z0-9]*[a-z0-9])?"
_DNS_LABEL_RE = re.compile(_DNS_LABEL)
_DNS_SUBDOMAIN_RE = re.compile(rf"{_DNS_LABEL}(\.{_DNS_LABEL})*")

SSH_KEY_TYPES = frozenset(
    {
        "ssh-rsa",
        "ssh-dss",
        "ssh-ed25519",
        "ecdsa-sha2-nistp256",
        "ecdsa-sha2-nistp384",
        "ecdsa-sha2-nistp521",
    }
)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class DependencyRegistry(Protocol):
    """Typed access to the already-resolved inputs."""

    def get_ssh_public_key(self) -> Optional[str]:
        ...

    def get_base_domain(self) -> Optional[str]:
        ...

    def get_cluster_name(self) -> Optional[str]:
        ...

    def get_pull_secret(self) -> Optional[str]:
        ...

    def get_platform(self) -> Optional[Platform]:
        ...


@dataclass(frozen=True)
class Parents:
    """Concrete :class:`DependencyRegistry`; ``None`` marks an unresolved input."""

    ssh_public_key: Optional[str] = None
    base_domain: Optional[str] = None
    cluster_name: Optional[str] = None
    pull_secret: Optional[str] = None
    platform: Optional[Platform] = None

    def get_ssh_public_key(self) -> Optional[str]:
        return self.ssh_public_key

    def get_base_domain(self) -> Optional[str]:
        return self.base_domain

    def get_cluster_name(self) -> Optional[str]:
        return self.cluster_name

    def get_pull_secret(self) -> Optional[str]:
        return self.pull_secret

    def get_platform(self) -> Optional[Platform]:
        return self.platform


# ---------------------------------------------------------------------------
# Per-input validation
# ---------------------------------------------------------------------------


def validate_base_domain(value: str) -> str:
    """Base domain must be a lowercase DNS subdomain of at most 253 characters."""
    if len(value) > 253 or not _DNS_SUBDOMAIN_RE.fullmatch(value):
        raise InvalidInputError(
            f"invalid base domain {value!r}: must be a lowercase DNS name"
        )
    return value


def validate_cluster_name(value: str) -> str:
    """Cluster name must be a single lowercase DNS label (max 63 characters)."""
    if len(value) > 63 or not _DNS_LABEL_RE.fullmatch(value):
        raise InvalidInputError(
            f"invalid cluster name {value!r}: must be a lowercase DNS label"
        )
    return value


def validate_pull_secret(value: str) -> str:
    """Pull secret must be a JSON object with an ``auths`` section."""
    try:
        doc = json.loads(value)
    except json.JSONDecodeError as exc:
        raise InvalidInputError(f"pull secret is not valid JSON: {exc}") from exc
    if not isinstance(doc, dict) or "auths" not in doc:
        raise InvalidInputError("pull secret must be a JSON object with an 'auths' key")
    return value


def validate_ssh_public_key(value: str) -> str:
    """Accept an empty key or a single ``<type> <base64> [comment]`` line."""
    if not value:
        return value
    parts = value.split()
    if len(parts) < 2 or parts[0] not in SSH_KEY_TYPES:
        raise InvalidInputError("SSH public key is not in authorized_keys format")
    try:
        base64.b64decode(parts[1], validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidInputError("SSH public key body is not valid base64") from exc
    return value


# ---------------------------------------------------------------------------
# Environment resolution
# ---------------------------------------------------------------------------


def _value_or_file(env: Mapping[str, str], var: str, path_var: str) -> Optional[str]:
    """Return *var* from *env*, else the stripped contents of the file at *path_var*."""
    value = env.get(var, "")
    if value:
        return value
    path = env.get(path_var, "")
    if not path:
        return None
    try:
        return Path(path).expanduser().read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise InvalidInputError(f"cannot read {path_var}={path}: {exc}") from exc


def resolve_platform(env: Mapping[str, str]) -> Optional[Platform]:
    """Build the platform selection named by ``OPENSHIFT_INSTALL_PLATFORM``."""
    name = env.get(PLATFORM_ENV, "")
    if not name:
        return None
    if name == "aws":
        return Platform.of(AWSPlatform(region=resolve_region(env)))
    if name == "libvirt":
        uri = env.get(LIBVIRT_URI_ENV, "")
        return Platform.of(LibvirtPlatform(uri=uri) if uri else LibvirtPlatform())
    if name == "openstack":
        region = env.get(OPENSTACK_REGION_ENV, "")
        if not region:
            raise InvalidInputError(
                f"{OPENSTACK_REGION_ENV} is required for the openstack platform"
            )
        return Platform.of(
            OpenStackPlatform(
                region=region,
                cloud=env.get(OPENSTACK_CLOUD_ENV, ""),
                external_network=env.get(OPENSTACK_EXTERNAL_NETWORK_ENV, ""),
                base_image=env.get(OPENSTACK_IMAGE_ENV, ""),
            )
        )
    if name == "none":
        return Platform.of(NonePlatform())
    raise InvalidInputError(
        f"unknown platform {name!r}, expected one of: {', '.join(PLATFORM_NAMES)}"
    )


def resolve_inputs(environ: Optional[Mapping[str, str]] = None) -> Parents:
    """Resolve every input from *environ* (default ``os.environ``).

    Unset inputs are left as ``None``; the SSH key defaults to empty.
    """
    env = os.environ if environ is None else environ

    ssh_key = _value_or_file(env, SSH_KEY_ENV, SSH_KEY_PATH_ENV) or ""
    base_domain = env.get(BASE_DOMAIN_ENV) or None
    cluster_name = env.get(CLUSTER_NAME_ENV) or None
    pull_secret = _value_or_file(env, PULL_SECRET_ENV, PULL_SECRET_PATH_ENV) or None

    parents = Parents(
        ssh_public_key=validate_ssh_public_key(ssh_key),
        base_domain=validate_base_domain(base_domain) if base_domain else None,
        cluster_name=validate_cluster_name(cluster_name) if cluster_name else None,
        pull_secret=validate_pull_secret(pull_secret) if pull_secret else None,
        platform=resolve_platform(env),
    )
    unresolved = [
        label
        for label, value in (
            ("base domain", parents.base_domain),
            ("cluster name", parents.cluster_name),
            ("pull secret", parents.pull_secret),
            ("platform", parents.platform),
        )
        if value is None
    ]
    if unresolved:
        logger.debug("Inputs not set in environment: %s", ", ".join(unresolved))
    return parents
