"""Error taxonomy for install-config generation and loading.

``load`` reports a missing document by returning ``False``; everything
else that stops generation or loading is raised as one of these.
"""

from __future__ import annotations


class InstallConfigError(Exception):
    """Base class for all install-config failures."""


class MissingDependencyError(InstallConfigError):
    """A required input is absent from the registry or has the wrong type."""

    def __init__(self, dependency: str, reason: str = "is missing") -> None:
        self.dependency = dependency
        super().__init__(f"required input {dependency!r} {reason}")


class InvalidInputError(InstallConfigError):
    """An input was supplied but does not pass its own validation."""


class FetchError(InstallConfigError):
    """The persisted document could not be fetched for a reason other than absence."""


class ParseError(InstallConfigError):
    """The fetched content is not structured text of the expected shape."""


class ValidationError(InstallConfigError):
    """The config parsed but violates an invariant."""
