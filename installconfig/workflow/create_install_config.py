"""Load-or-generate orchestration for ``install-config.yaml``.

1. **Load**: read the document from the asset directory if it exists.
2. **Generate**: otherwise compose it from environment inputs.
3. **Write**: persist the result back to the asset directory.

Errors from the asset are mapped to exit codes here; nothing below this
module decides to fall back or exit.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional, Tuple, Union

from installconfig import ui
from installconfig.asset.files import DirectoryFetcher, asset_dir, write_asset_files
from installconfig.asset.inputs import resolve_inputs
from installconfig.asset.installconfig import INSTALL_CONFIG_FILENAME, InstallConfigAsset
from installconfig.config.models import InstallConfig
from installconfig.errors import (
    FetchError,
    InstallConfigError,
    InvalidInputError,
    MissingDependencyError,
)

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_INVALID_CONFIG = 1
EXIT_MISSING_INPUT = 2
EXIT_FETCH_FAILURE = 3


def exit_code_for(exc: InstallConfigError) -> int:
    """Map an asset error to the command's exit code."""
    if isinstance(exc, (MissingDependencyError, InvalidInputError)):
        return EXIT_MISSING_INPUT
    if isinstance(exc, FetchError):
        return EXIT_FETCH_FAILURE
    return EXIT_INVALID_CONFIG


def load_or_generate(
    directory: Union[str, Path],
    environ: Optional[Mapping[str, str]] = None,
) -> Tuple[InstallConfigAsset, bool]:
    """Return the asset and whether it was loaded (``False`` = generated).

    Raises :class:`InstallConfigError` subclasses unchanged.
    """
    asset = InstallConfigAsset()
    if asset.load(DirectoryFetcher(directory)):
        return asset, True
    logger.info("No %s in %s, generating from inputs", INSTALL_CONFIG_FILENAME, directory)
    asset.generate(resolve_inputs(environ))
    return asset, False


def _summarize(config: InstallConfig) -> None:
    ui.detail("cluster", config.name)
    ui.detail("base domain", config.base_domain)
    ui.detail("platform", config.platform.name if config.platform else "-")
    ui.detail("network type", config.networking.type)
    for pool in config.machines:
        replicas = "unset" if pool.replicas is None else str(pool.replicas)
        ui.detail(f"{pool.name} replicas", replicas)


def run_create(
    directory: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Load or generate the install config and write it to *directory*."""
    target = asset_dir(directory)
    ui.phase("INSTALL CONFIG")
    try:
        asset, loaded = load_or_generate(target, environ)
        config = asset.stored()
    except InstallConfigError as exc:
        logger.error("Install config failed: %s", exc)
        ui.error_panel(type(exc).__name__, str(exc))
        return exit_code_for(exc)

    if loaded:
        ui.ok(f"Loaded {INSTALL_CONFIG_FILENAME} from {target}")
    else:
        ui.ok("Generated install config from inputs")
    _summarize(config)

    for path in write_asset_files(asset.files(), target):
        ui.step(f"Wrote {path}")
    return EXIT_SUCCESS


def run_validate(directory: Optional[Union[str, Path]] = None) -> int:
    """Load the persisted install config and report whether it is valid."""
    target = asset_dir(directory)
    ui.phase("VALIDATE")
    asset = InstallConfigAsset()
    try:
        if not asset.load(DirectoryFetcher(target)):
            ui.fail(f"No {INSTALL_CONFIG_FILENAME} in {target}")
            return EXIT_INVALID_CONFIG
        config = asset.stored()
    except InstallConfigError as exc:
        logger.error("Validation failed: %s", exc)
        ui.fail(str(exc))
        return exit_code_for(exc)

    ui.ok(f"{INSTALL_CONFIG_FILENAME} is valid")
    _summarize(config)
    return EXIT_SUCCESS


def run_show(
    directory: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Print the install config that ``create`` would write, without writing it."""
    target = asset_dir(directory)
    try:
        asset, _ = load_or_generate(target, environ)
        config = asset.stored()
    except InstallConfigError as exc:
        logger.error("Install config failed: %s", exc)
        ui.error_panel(type(exc).__name__, str(exc))
        return exit_code_for(exc)
    ui.yaml_document(config.to_yaml())
    return EXIT_SUCCESS
