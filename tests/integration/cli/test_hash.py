"""Integration tests for the hash and algorithms commands"""

import hashlib

from typer.testing import CliRunner

from digestkit.cli.cli import app


runner = CliRunner()


def test_hash_uses_default_sha256():
    result = runner.invoke(app, ["hash", ""])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_hash_algorithm_option():
    result = runner.invoke(app, ["hash", "test", "--algorithm", "sha1"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "a94a8fe5ccb19ba61c4c0873d391e987982fbbd3"


def test_hash_algorithm_from_config_yaml(tmp_path):
    """The default algorithm comes from config.yaml when no option is given."""
    (tmp_path / "config.yaml").write_text("algorithm: md5\n")
    result = runner.invoke(app, ["hash", "test"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "098f6bcd4621d373cade4e832627b4f6"


def test_hash_reads_stdin():
    result = runner.invoke(app, ["hash", "-", "-a", "md5"], input="test")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "098f6bcd4621d373cade4e832627b4f6"


def test_hash_all_prints_every_algorithm():
    result = runner.invoke(app, ["hash", "test", "--all"])
    assert result.exit_code == 0, result.output
    lines = dict(line.split() for line in result.output.strip().splitlines())
    assert list(lines) == ["md5", "sha1", "sha256", "sha512"]
    assert lines["md5"] == "098f6bcd4621d373cade4e832627b4f6"
    assert lines["sha512"].startswith("ee26b0dd4af7e749")


def test_hash_invalid_algorithm_fails():
    result = runner.invoke(app, ["hash", "test", "-a", "sha3_256"])
    assert result.exit_code == 1
    assert "Error: Invalid configuration" in result.output


def test_hash_digest_error_exits_1(monkeypatch):
    """A DigestError is reported on stderr with exit code 1."""
    def unavailable(name, *args, **kwargs):
        raise ValueError(f"unsupported hash type {name}")

    monkeypatch.setattr(hashlib, "new", unavailable)
    result = runner.invoke(app, ["hash", "test", "-a", "md5"])
    assert result.exit_code == 1
    assert "Error: An invalid algorithm was configured" in result.output


def test_algorithms_lists_hex_lengths():
    result = runner.invoke(app, ["algorithms"])
    assert result.exit_code == 0, result.output
    assert dict(line.split() for line in result.output.strip().splitlines()) == {
        "md5": "32", "sha1": "40", "sha256": "64", "sha512": "128",
    }


def test_hash_rejects_invalid_utf8_stdin():
    """Undecodable stdin is reported as an error instead of a traceback."""
    result = runner.invoke(app, ["hash", "-"], input=b"\xff\xfe bad")
    assert result.exit_code == 1
    assert "Error: Standard input is not valid UTF-8" in result.output
