"""Tests for HostKeyVerifier."""

from pathlib import Path

import pytest

from sshexec.config import HostKeyPolicy, HostKeyVerifier


def test_verifier_uses_custom_path(tmp_path: Path) -> None:
    custom = tmp_path / "my_known_hosts"
    custom.touch()

    verifier = HostKeyVerifier(known_hosts_path=str(custom))
    assert verifier.policy is HostKeyPolicy.VERIFY
    assert verifier.get_known_hosts_path() == str(custom)
    assert verifier.is_enabled()


def test_verifier_defaults_to_home_known_hosts(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    known_hosts = tmp_path / ".ssh" / "known_hosts"
    known_hosts.parent.mkdir()
    known_hosts.touch()

    assert HostKeyVerifier().get_known_hosts_path() == str(known_hosts)


def test_verifier_fails_closed_on_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "nonexistent"
    with pytest.raises(FileNotFoundError, match="known_hosts file not found"):
        HostKeyVerifier(known_hosts_path=str(missing))


def test_insecure_policy_disables_verification(tmp_path: Path) -> None:
    verifier = HostKeyVerifier(
        policy="insecure", known_hosts_path=str(tmp_path / "ignored")
    )
    assert verifier.policy is HostKeyPolicy.INSECURE
    assert verifier.get_known_hosts_path() is None
    assert not verifier.is_enabled()


def test_unknown_policy_rejected() -> None:
    with pytest.raises(ValueError):
        HostKeyVerifier(policy="maybe")
