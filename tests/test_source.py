import subprocess

import pytest

from iptables_save_parser import source
from iptables_save_parser.errors import SourceError


def test_read_rules_file(tmp_path):
    path = tmp_path / "rules.v4"
    path.write_text("*filter\nCOMMIT\n")
    assert source.read_rules_file(path) == ["*filter", "COMMIT"]


def test_read_missing_file(tmp_path):
    with pytest.raises(SourceError):
        source.read_rules_file(tmp_path / "missing")


def test_read_undecodable_file(tmp_path):
    path = tmp_path / "rules.v4"
    path.write_bytes(b"# caf\xe9\n")
    with pytest.raises(SourceError):
        source.read_rules_file(path)


def test_run_iptables_save_undecodable_output(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise UnicodeDecodeError("utf-8", b"\xe9", 0, 1, "invalid continuation byte")

    monkeypatch.setattr(source.subprocess, "run", fake_run)
    with pytest.raises(SourceError):
        source.run_iptables_save()


def test_run_iptables_save(monkeypatch):
    seen = {}

    def fake_run(cmd, **kwargs):
        seen["cmd"] = cmd
        return subprocess.CompletedProcess(cmd, 0, stdout="*nat\nCOMMIT\n", stderr="")

    monkeypatch.setattr(source.subprocess, "run", fake_run)
    assert source.run_iptables_save(table="nat") == ["*nat", "COMMIT"]
    assert seen["cmd"] == ["iptables-save", "-t", "nat"]


def test_run_iptables_save_failure(monkeypatch):
    def fake_run(cmd, **kwargs):
        return subprocess.CompletedProcess(cmd, 1, stdout="", stderr="Permission denied")

    monkeypatch.setattr(source.subprocess, "run", fake_run)
    with pytest.raises(SourceError, match="Permission denied"):
        source.run_iptables_save()


def test_run_iptables_save_missing_binary():
    with pytest.raises(SourceError):
        source.run_iptables_save(binary="/nonexistent/iptables-save")
