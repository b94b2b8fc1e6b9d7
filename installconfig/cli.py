"""CLI entry point for installconfig, built on typer.

Provides ``create``, ``validate`` and ``show`` commands for the
``install-config.yaml`` asset.

Usage::

    installconfig --help
    installconfig create --dir ./my-cluster
    installconfig validate --dir ./my-cluster
    installconfig show --dir ./my-cluster
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

app = typer.Typer(
    name="installconfig",
    help="Generate, load and validate cluster install configs.",
    no_args_is_help=True,
    add_completion=False,
)

_DIR_HELP = (
    "Asset directory holding install-config.yaml. "
    "Defaults to $OPENSHIFT_INSTALL_DIR, then the current directory."
)


@app.command()
def create(
    directory: Optional[str] = typer.Option(None, "--dir", help=_DIR_HELP),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Load install-config.yaml, or generate it from the environment, and write it.

    Environment variables:
      OPENSHIFT_INSTALL_BASE_DOMAIN     Base DNS domain of the cluster.
      OPENSHIFT_INSTALL_CLUSTER_NAME    Cluster name (a DNS label).
      OPENSHIFT_INSTALL_PULL_SECRET     Pull secret JSON (or *_PATH to a file).
      OPENSHIFT_INSTALL_SSH_PUB_KEY     SSH public key (or *_PATH to a file).
      OPENSHIFT_INSTALL_PLATFORM        aws, libvirt, openstack or none.
    """
    from installconfig.workflow.create_install_config import run_create

    if debug:
        logging.basicConfig(level=logging.DEBUG)
    raise typer.Exit(run_create(directory))


@app.command()
def validate(
    directory: Optional[str] = typer.Option(None, "--dir", help=_DIR_HELP),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Validate an existing install-config.yaml.

    Exits 0 when valid, 1 when missing or invalid, 3 when unreadable.
    """
    from installconfig.workflow.create_install_config import run_validate

    if debug:
        logging.basicConfig(level=logging.DEBUG)
    raise typer.Exit(run_validate(directory))


@app.command()
def show(
    directory: Optional[str] = typer.Option(None, "--dir", help=_DIR_HELP),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Print the install config that ``create`` would write."""
    from installconfig.workflow.create_install_config import run_show

    if debug:
        logging.basicConfig(level=logging.DEBUG)
    raise typer.Exit(run_show(directory))


def main() -> int:
    """Run the CLI and return an exit code."""
    try:
        app()
        return 0
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0


if __name__ == "__main__":
    sys.exit(main())
