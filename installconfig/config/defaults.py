"""Defaults Table for the structural parts of an install config.

Every value the composer fills in without being asked lives here, and the
models fall back to the same table when a loaded document omits a field.
Pass a different :class:`InstallDefaults` to
:meth:`~installconfig.asset.installconfig.InstallConfigAsset.generate`
to substitute values (e.g. in tests).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

#: Value of ``apiVersion`` for documents produced by this package.
SCHEMA_VERSION = "v1beta1"


@dataclass(frozen=True)
class InstallDefaults:
    """Named default values for networking and machine pools.

    Attributes:
        machine_cidr: Range the cluster machines are addressed from.
        service_cidr: Range for cluster service addresses.
        network_type: Network plugin identifier.
        cluster_network_cidr: Range pod networks are carved from.
        host_subnet_length: Bits of ``cluster_network_cidr`` given to each host.
        replicas: Replica count applied to every default pool.
        pool_names: Machine pool roles, in order.
    """

    machine_cidr: str = "10.0.0.0/16"
    service_cidr: str = "172.30.0.0/16"
    network_type: str = "OpenshiftSDN"
    cluster_network_cidr: str = "10.128.0.0/14"
    host_subnet_length: int = 9
    replicas: int = 3
    pool_names: Tuple[str, ...] = ("master", "worker")


DEFAULTS = InstallDefaults()
