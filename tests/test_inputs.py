"""Tests for installconfig.asset.inputs — registry and environment resolution."""

from __future__ import annotations

import pytest

from installconfig.asset.inputs import (
    Parents,
    resolve_inputs,
    resolve_platform,
    validate_base_domain,
    validate_cluster_name,
    validate_pull_secret,
    validate_ssh_public_key,
)
from installconfig.config.models import (
    AWSPlatform,
    LibvirtPlatform,
    NonePlatform,
    OpenStackPlatform,
    Platform,
)
from installconfig.errors import InvalidInputError

PULL_SECRET = '{"auths":{"example.com":{"auth":"authorization value"}}}'
SSH_KEY = "ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIOMqqnkVzrm0SdG6UOoqKLsabgH5C9okWi0dh2l9GKJl user@host"

FULL_ENV = {
    "OPENSHIFT_INSTALL_BASE_DOMAIN": "example.com",
    "OPENSHIFT_INSTALL_CLUSTER_NAME": "test-cluster",
    "OPENSHIFT_INSTALL_PULL_SECRET": PULL_SECRET,
    "OPENSHIFT_INSTALL_SSH_PUB_KEY": SSH_KEY,
    "OPENSHIFT_INSTALL_PLATFORM": "none",
}


# ── Parents registry ───────────────────────────────────────────────────


class TestParents:
    def test_getters_return_fields(self):
        platform = Platform.of(NonePlatform())
        parents = Parents(
            ssh_public_key="",
            base_domain="d",
            cluster_name="c",
            pull_secret="p",
            platform=platform,
        )
        assert parents.get_ssh_public_key() == ""
        assert parents.get_base_domain() == "d"
        assert parents.get_cluster_name() == "c"
        assert parents.get_pull_secret() == "p"
        assert parents.get_platform() is platform

    def test_unset_is_none(self):
        parents = Parents()
        assert parents.get_base_domain() is None
        assert parents.get_platform() is None


# ── Per-input validation ───────────────────────────────────────────────


class TestValidators:
    @pytest.mark.parametrize("value", ["example.com", "a.b-c.d", "test-domain"])
    def test_base_domain_ok(self, value):
        assert validate_base_domain(value) == value

    @pytest.mark.parametrize("value", ["Example.com", "-bad.com", "a..b", "a_b.com", "example.com\n"])
    def test_base_domain_bad(self, value):
        with pytest.raises(InvalidInputError):
            validate_base_domain(value)

    def test_cluster_name_ok(self):
        assert validate_cluster_name("test-cluster") == "test-cluster"

    @pytest.mark.parametrize("value", ["with.dot", "UPPER", "x" * 64, "trailing-", "test-cluster\n"])
    def test_cluster_name_bad(self, value):
        with pytest.raises(InvalidInputError):
            validate_cluster_name(value)

    def test_pull_secret_ok(self):
        assert validate_pull_secret(PULL_SECRET) == PULL_SECRET

    def test_pull_secret_not_json(self):
        with pytest.raises(InvalidInputError, match="not valid JSON"):
            validate_pull_secret("{nope")

    def test_pull_secret_without_auths(self):
        with pytest.raises(InvalidInputError, match="auths"):
            validate_pull_secret('{"registry": {}}')

    def test_ssh_key_ok(self):
        assert validate_ssh_public_key(SSH_KEY) == SSH_KEY

    def test_ssh_key_empty_allowed(self):
        assert validate_ssh_public_key("") == ""

    def test_ssh_key_unknown_type(self):
        with pytest.raises(InvalidInputError, match="authorized_keys"):
            validate_ssh_public_key("pgp-key AAAA")

    def test_ssh_key_bad_base64(self):
        with pytest.raises(InvalidInputError, match="base64"):
            validate_ssh_public_key("ssh-rsa not*base64")


# ── Platform resolution ────────────────────────────────────────────────


class TestResolvePlatform:
    def test_unset(self):
        assert resolve_platform({}) is None

    def test_none(self):
        assert resolve_platform({"OPENSHIFT_INSTALL_PLATFORM": "none"}) == Platform.of(
            NonePlatform()
        )

    def test_aws_region(self):
        env = {
            "OPENSHIFT_INSTALL_PLATFORM": "aws",
            "OPENSHIFT_INSTALL_AWS_REGION": "us-west-2",
        }
        assert resolve_platform(env) == Platform.of(AWSPlatform(region="us-west-2"))

    def test_aws_default_region(self):
        platform = resolve_platform({"OPENSHIFT_INSTALL_PLATFORM": "aws"})
        assert platform.variant.region == "us-east-1"

    def test_libvirt_uri(self):
        env = {
            "OPENSHIFT_INSTALL_PLATFORM": "libvirt",
            "OPENSHIFT_INSTALL_LIBVIRT_URI": "qemu:///system",
        }
        assert resolve_platform(env).variant == LibvirtPlatform(uri="qemu:///system")

    def test_libvirt_default_uri(self):
        platform = resolve_platform({"OPENSHIFT_INSTALL_PLATFORM": "libvirt"})
        assert platform.variant == LibvirtPlatform()

    def test_openstack(self):
        env = {
            "OPENSHIFT_INSTALL_PLATFORM": "openstack",
            "OPENSHIFT_INSTALL_OPENSTACK_REGION": "RegionOne",
            "OPENSHIFT_INSTALL_OPENSTACK_CLOUD": "mycloud",
        }
        assert resolve_platform(env).variant == OpenStackPlatform(
            region="RegionOne", cloud="mycloud"
        )

    def test_openstack_requires_region(self):
        with pytest.raises(InvalidInputError, match="OPENSTACK_REGION"):
            resolve_platform({"OPENSHIFT_INSTALL_PLATFORM": "openstack"})

    def test_unknown(self):
        with pytest.raises(InvalidInputError, match="unknown platform"):
            resolve_platform({"OPENSHIFT_INSTALL_PLATFORM": "vsphere"})


# ── resolve_inputs ─────────────────────────────────────────────────────


class TestResolveInputs:
    def test_full_environment(self):
        parents = resolve_inputs(FULL_ENV)
        assert parents == Parents(
            ssh_public_key=SSH_KEY,
            base_domain="example.com",
            cluster_name="test-cluster",
            pull_secret=PULL_SECRET,
            platform=Platform.of(NonePlatform()),
        )

    def test_empty_environment(self):
        parents = resolve_inputs({})
        assert parents.ssh_public_key == ""
        assert parents.base_domain is None
        assert parents.cluster_name is None
        assert parents.pull_secret is None
        assert parents.platform is None

    def test_files_used_when_values_unset(self, tmp_path):
        secret = tmp_path / "pull-secret.json"
        secret.write_text(PULL_SECRET + "\n")
        key = tmp_path / "id_ed25519.pub"
        key.write_text(SSH_KEY + "\n")
        env = {
            "OPENSHIFT_INSTALL_PULL_SECRET_PATH": str(secret),
            "OPENSHIFT_INSTALL_SSH_PUB_KEY_PATH": str(key),
        }
        parents = resolve_inputs(env)
        assert parents.pull_secret == PULL_SECRET
        assert parents.ssh_public_key == SSH_KEY

    def test_value_beats_file(self, tmp_path):
        env = {
            "OPENSHIFT_INSTALL_PULL_SECRET": PULL_SECRET,
            "OPENSHIFT_INSTALL_PULL_SECRET_PATH": str(tmp_path / "missing.json"),
        }
        assert resolve_inputs(env).pull_secret == PULL_SECRET

    def test_unreadable_file(self, tmp_path):
        env = {"OPENSHIFT_INSTALL_PULL_SECRET_PATH": str(tmp_path / "missing.json")}
        with pytest.raises(InvalidInputError, match="cannot read"):
            resolve_inputs(env)

    def test_invalid_cluster_name(self):
        env = dict(FULL_ENV, OPENSHIFT_INSTALL_CLUSTER_NAME="Bad_Name")
        with pytest.raises(InvalidInputError, match="cluster name"):
            resolve_inputs(env)

    def test_reads_os_environ(self, monkeypatch):
        for key, value in FULL_ENV.items():
            monkeypatch.setenv(key, value)
        assert resolve_inputs().cluster_name == "test-cluster"
