"""Tests for HostEntry."""

import pytest
from pydantic import ValidationError

from sshconfig.types import (
    DEFAULT_IDENTITY_FILE,
    DEFAULT_PORT,
    DEFAULT_USER,
    HostEntry,
)


class TestHostEntry:
    def test_for_host_defaults(self):
        entry = HostEntry.for_host("web")

        assert entry.name == "web"
        assert entry.host == "web"
        assert entry.port == DEFAULT_PORT == 22
        assert entry.user == DEFAULT_USER == "root"
        assert entry.identity_file == DEFAULT_IDENTITY_FILE == "~/.ssh/id_rsa"

    def test_for_host_empty_name(self):
        entry = HostEntry.for_host("")

        assert entry.name == ""
        assert entry.host == ""

    def test_optional_fields_may_be_unset(self):
        entry = HostEntry(name="a", host="a", port=None, identity_file=None)

        assert entry.port is None
        assert entry.identity_file is None

    def test_port_range(self):
        with pytest.raises(ValidationError):
            HostEntry(name="a", host="a", port=65536)
        with pytest.raises(ValidationError):
            HostEntry(name="a", host="a", port=-1)


class TestToSSHArgs:
    def test_default_port_omitted(self):
        entry = HostEntry(name="gh", host="github.com", user="git")
        assert entry.to_ssh_args() == ["-i", "~/.ssh/id_rsa", "git@github.com"]

    def test_custom_port(self):
        entry = HostEntry(name="db", host="db.internal", user="admin", port=2222)
        assert entry.to_ssh_args() == [
            "-p",
            "2222",
            "-i",
            "~/.ssh/id_rsa",
            "admin@db.internal",
        ]

    def test_no_identity_file(self):
        entry = HostEntry(name="a", host="a.example", port=None, identity_file=None)
        assert entry.to_ssh_args() == ["root@a.example"]
