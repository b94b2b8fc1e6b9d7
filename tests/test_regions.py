"""Tests for installconfig.aws.regions — region catalogue and precedence."""

from __future__ import annotations

import pytest

from installconfig.aws.regions import (
    DEFAULT_REGION,
    known_regions,
    resolve_region,
    validate_region,
)
from installconfig.errors import InvalidInputError


class TestKnownRegions:
    def test_contains_common_regions(self):
        regions = known_regions()
        assert "us-east-1" in regions
        assert "eu-west-1" in regions

    def test_sorted(self):
        regions = known_regions()
        assert list(regions) == sorted(regions)


class TestValidateRegion:
    def test_known(self):
        assert validate_region("us-west-2") == "us-west-2"

    def test_unknown(self):
        with pytest.raises(InvalidInputError, match="unknown AWS region"):
            validate_region("mars-north-1")

    def test_empty(self):
        with pytest.raises(InvalidInputError, match="must not be empty"):
            validate_region("")


class TestResolveRegion:
    def test_installer_var_wins(self):
        env = {
            "OPENSHIFT_INSTALL_AWS_REGION": "eu-west-1",
            "AWS_DEFAULT_REGION": "us-west-2",
            "AWS_REGION": "us-east-2",
        }
        assert resolve_region(env) == "eu-west-1"

    def test_aws_default_region(self):
        env = {"AWS_DEFAULT_REGION": "us-west-2", "AWS_REGION": "us-east-2"}
        assert resolve_region(env) == "us-west-2"

    def test_aws_region(self):
        assert resolve_region({"AWS_REGION": "us-east-2"}) == "us-east-2"

    def test_fallback(self):
        assert resolve_region({}) == DEFAULT_REGION

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.delenv("OPENSHIFT_INSTALL_AWS_REGION", raising=False)
        monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)
        monkeypatch.setenv("AWS_REGION", "ap-southeast-2")
        assert resolve_region() == "ap-southeast-2"

    def test_invalid_env_region(self):
        with pytest.raises(InvalidInputError):
            resolve_region({"AWS_REGION": "nowhere"})
