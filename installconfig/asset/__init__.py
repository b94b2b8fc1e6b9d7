"""Assets: the install config, its inputs, and the files behind them."""

from installconfig.asset.files import (
    ASSET_DIR_ENV,
    AssetFile,
    DirectoryFetcher,
    FileFetcher,
    asset_dir,
    write_asset_files,
)
from installconfig.asset.inputs import (
    DependencyRegistry,
    Parents,
    resolve_inputs,
    resolve_platform,
)
from installconfig.asset.installconfig import (
    INSTALL_CONFIG_FILENAME,
    InstallConfigAsset,
    parse_install_config,
)

__all__ = [
    "ASSET_DIR_ENV",
    "AssetFile",
    "DependencyRegistry",
    "DirectoryFetcher",
    "FileFetcher",
    "INSTALL_CONFIG_FILENAME",
    "InstallConfigAsset",
    "Parents",
    "asset_dir",
    "parse_install_config",
    "resolve_inputs",
    "resolve_platform",
    "write_asset_files",
]
