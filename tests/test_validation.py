"""Tests for installconfig.config.validation — fail-fast invariant order."""

from __future__ import annotations

import pytest

from installconfig.config.models import (
    ClusterMetadata,
    InstallConfig,
    NonePlatform,
    Platform,
)
from installconfig.config.validation import is_valid, validate_install_config
from installconfig.errors import ValidationError


def _valid(**overrides) -> InstallConfig:
    fields = dict(
        api_version="v1beta1",
        metadata=ClusterMetadata(name="test-cluster"),
        base_domain="test-domain",
        platform=Platform.of(NonePlatform()),
        pull_secret='{"auths":{}}',
    )
    fields.update(overrides)
    return InstallConfig(**fields)


class TestValidateInstallConfig:
    def test_valid_passes(self):
        validate_install_config(_valid())
        assert is_valid(_valid()) is True

    def test_empty_api_version(self):
        with pytest.raises(ValidationError, match="apiVersion"):
            validate_install_config(_valid(api_version=""))

    def test_empty_name(self):
        with pytest.raises(ValidationError, match="metadata.name"):
            validate_install_config(_valid(metadata=ClusterMetadata()))

    def test_empty_base_domain(self):
        with pytest.raises(ValidationError, match="baseDomain"):
            validate_install_config(_valid(base_domain=""))

    def test_missing_platform(self):
        with pytest.raises(ValidationError, match="platform"):
            validate_install_config(_valid(platform=None))

    def test_empty_pull_secret(self):
        with pytest.raises(ValidationError, match="pullSecret"):
            validate_install_config(_valid(pull_secret=""))
        assert is_valid(_valid(pull_secret="")) is False

    def test_first_violation_reported(self):
        """Only the earliest failing check is reported."""
        with pytest.raises(ValidationError, match="apiVersion"):
            validate_install_config(InstallConfig())

    def test_platform_problem_reported(self):
        platform = Platform.model_validate({"aws": {"region": "us-east-1"}, "none": {}})
        with pytest.raises(ValidationError, match="got: aws, none"):
            validate_install_config(_valid(platform=platform))

    def test_empty_platform_mapping(self):
        with pytest.raises(ValidationError, match="exactly one of"):
            validate_install_config(_valid(platform=Platform.model_validate({})))

    def test_name_checked_before_platform_problem(self):
        platform = Platform.model_validate({"gcp": {}})
        with pytest.raises(ValidationError, match="metadata.name"):
            validate_install_config(_valid(metadata=ClusterMetadata(), platform=platform))
