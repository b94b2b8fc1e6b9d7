"""The install config asset: compose it from inputs or load it from disk.

:meth:`InstallConfigAsset.generate` and :meth:`InstallConfigAsset.load`
are alternative ways of filling :attr:`InstallConfigAsset.config`.  Both
leave a previously stored config untouched when they fail, and a later
successful call replaces it entirely.

``load`` follows a tri-state contract:

* returns ``True``: the document was fetched, parsed and validated
* returns ``False``: no document exists (the caller may generate one)
* raises: the document exists but is unreadable, unparsable or invalid
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Type, TypeVar

import pydantic
import yaml

from installconfig.asset.files import AssetFile, FileFetcher
from installconfig.asset.inputs import DependencyRegistry
from installconfig.config.defaults import DEFAULTS, SCHEMA_VERSION, InstallDefaults
from installconfig.config.models import (
    ClusterMetadata,
    InstallConfig,
    Networking,
    Platform,
    default_machine_pools,
)
from installconfig.config.validation import validate_install_config
from installconfig.errors import (
    FetchError,
    InstallConfigError,
    MissingDependencyError,
    ParseError,
    ValidationError,
)

logger = logging.getLogger(__name__)

INSTALL_CONFIG_FILENAME = "install-config.yaml"

T = TypeVar("T")


def _require(value: Any, dependency: str, expected: Type[T]) -> T:
    if value is None:
        raise MissingDependencyError(dependency)
    if not isinstance(value, expected):
        raise MissingDependencyError(
            dependency, f"has type {type(value).__name__}, expected {expected.__name__}"
        )
    return value


def parse_install_config(data: bytes) -> InstallConfig:
    """Parse YAML *data* into an :class:`InstallConfig` without validating it.

    Raises :class:`ParseError` for empty input, non-mapping documents and
    shape mismatches.  A platform mapping with zero, several or unknown
    variants still parses; the validator rejects it.
    """
    try:
        raw = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise ParseError(f"{INSTALL_CONFIG_FILENAME} is not valid YAML: {exc}") from exc
    if raw is None:
        raise ParseError(f"{INSTALL_CONFIG_FILENAME} is empty")
    if not isinstance(raw, dict):
        raise ParseError(
            f"{INSTALL_CONFIG_FILENAME} must be a mapping, got {type(raw).__name__}"
        )
    try:
        return InstallConfig.model_validate(raw)
    except pydantic.ValidationError as exc:
        raise ParseError(
            f"{INSTALL_CONFIG_FILENAME} does not match the install config schema: {exc}"
        ) from exc


class InstallConfigAsset:
    """Holds the install config produced by :meth:`generate` or :meth:`load`."""

    def __init__(self) -> None:
        self.config: Optional[InstallConfig] = None

    def name(self) -> str:
        return "Install Config"

    # -- generate ---------------------------------------------------------

    def generate(
        self,
        parents: DependencyRegistry,
        defaults: InstallDefaults = DEFAULTS,
    ) -> InstallConfig:
        """Compose the config from *parents* and the *defaults* table.

        Raises:
            MissingDependencyError: An input is unset or has the wrong type.
            ValidationError: The composed config breaks an invariant.  The
                defaults are expected to be consistent, so this points at a
                bad input or a bug and is never corrected here.
        """
        ssh_key = _require(parents.get_ssh_public_key(), "ssh public key", str)
        base_domain = _require(parents.get_base_domain(), "base domain", str)
        cluster_name = _require(parents.get_cluster_name(), "cluster name", str)
        pull_secret = _require(parents.get_pull_secret(), "pull secret", str)
        platform = _require(parents.get_platform(), "platform", Platform)

        config = InstallConfig(
            api_version=SCHEMA_VERSION,
            metadata=ClusterMetadata(name=cluster_name),
            base_domain=base_domain,
            ssh_key=ssh_key,
            networking=Networking.from_defaults(defaults),
            machines=default_machine_pools(defaults),
            platform=platform,
            pull_secret=pull_secret,
        )
        validate_install_config(config)

        self.config = config
        logger.info(
            "Generated install config for cluster %s (platform %s)",
            config.name,
            platform.name,
        )
        return config

    # -- load -------------------------------------------------------------

    def load(self, fetcher: FileFetcher) -> bool:
        """Load and validate the persisted config through *fetcher*.

        Returns ``False`` without parsing when the fetcher raises
        :class:`FileNotFoundError`.

        Raises:
            FetchError: Any other fetch failure (original error chained).
            ParseError: The content is not a well-formed install config.
            ValidationError: The content parses but breaks an invariant.
        """
        try:
            asset_file = fetcher.fetch_by_name(INSTALL_CONFIG_FILENAME)
        except FileNotFoundError:
            logger.debug("%s not found via %r", INSTALL_CONFIG_FILENAME, fetcher)
            return False
        except Exception as exc:
            raise FetchError(
                f"failed to fetch {INSTALL_CONFIG_FILENAME}: {exc}"
            ) from exc

        config = parse_install_config(asset_file.data)
        try:
            validate_install_config(config)
        except ValidationError as exc:
            raise ValidationError(f"invalid {INSTALL_CONFIG_FILENAME}: {exc}") from exc

        self.config = config
        logger.info("Loaded install config for cluster %s", config.name)
        return True

    def stored(self) -> InstallConfig:
        """Return the stored config.

        Raises :class:`InstallConfigError` when neither :meth:`generate` nor
        :meth:`load` has succeeded yet.
        """
        if self.config is None:
            raise InstallConfigError("no install config has been generated or loaded")
        return self.config

    # -- files ------------------------------------------------------------

    def files(self) -> List[AssetFile]:
        """Return the YAML rendering of the stored config, or nothing."""
        if self.config is None:
            return []
        return [
            AssetFile(
                filename=INSTALL_CONFIG_FILENAME,
                data=self.config.to_yaml().encode("utf-8"),
            )
        ]
