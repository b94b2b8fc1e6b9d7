"""Command workflows built on the install config asset."""

from installconfig.workflow.create_install_config import (
    EXIT_FETCH_FAILURE,
    EXIT_INVALID_CONFIG,
    EXIT_MISSING_INPUT,
    EXIT_SUCCESS,
    exit_code_for,
    load_or_generate,
    run_create,
    run_show,
    run_validate,
)

__all__ = [
    "EXIT_FETCH_FAILURE",
    "EXIT_INVALID_CONFIG",
    "EXIT_MISSING_INPUT",
    "EXIT_SUCCESS",
    "exit_code_for",
    "load_or_generate",
    "run_create",
    "run_show",
    "run_validate",
]
