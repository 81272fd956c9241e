"""HostsFileManager 测试"""

import io
import logging
import os
import stat

import pytest

from hostsctl.hosts_manager import HostsFileManager
from hostsctl.models import Passthrough, Record


@pytest.fixture
def logger():
    return logging.getLogger("hostsctl.test")


def test_read_entries(hosts_file, logger):
    manager = HostsFileManager(str(hosts_file), logger)
    entries = manager.read_entries()

    assert entries[0] == Passthrough("# comment")
    assert entries[2] == Record("10.0.0.5", ["foo.test", "bar.test"])
    assert entries[-1] == Passthrough("")


def test_read_missing_file_raises_and_logs(tmp_path, logger, caplog):
    manager = HostsFileManager(str(tmp_path / "missing"), logger)

    with caplog.at_level(logging.ERROR, logger="hostsctl.test"):
        with pytest.raises(FileNotFoundError):
            manager.read_entries()

    assert "Hosts 文件不存在" in caplog.text


def test_read_directory_raises_oserror(tmp_path, logger):
    manager = HostsFileManager(str(tmp_path), logger)
    with pytest.raises(OSError):
        manager.read_entries()


def test_write_entries_replaces_file(hosts_file, logger):
    manager = HostsFileManager(str(hosts_file), logger)
    entries = manager.read_entries()
    entries[1] = Record("127.0.0.1", ["localhost", "local"])

    manager.write_entries(entries)

    assert hosts_file.read_text() == (
        "# comment\n"
        "127.0.0.1\tlocalhost local\n"
        "10.0.0.5\tfoo.test bar.test\n"
    )
    assert [p.name for p in hosts_file.parent.iterdir()] == ["hosts"]


def test_write_entries_keeps_permissions(hosts_file, logger):
    os.chmod(hosts_file, 0o600)
    manager = HostsFileManager(str(hosts_file), logger)

    manager.write_entries(manager.read_entries())

    assert stat.S_IMODE(hosts_file.stat().st_mode) == 0o600


def test_write_entries_new_file_uses_default_mode(tmp_path, logger):
    path = tmp_path / "hosts"
    manager = HostsFileManager(str(path), logger)

    manager.write_entries([Record("10.0.0.1", ["a"]), Passthrough("")])

    assert path.read_text() == "10.0.0.1\ta\n"
    assert stat.S_IMODE(path.stat().st_mode) == 0o644


def test_debug_mode_prints_instead_of_writing(hosts_file, logger):
    out = io.StringIO()
    manager = HostsFileManager(str(hosts_file), logger, debug=True, stdout=out)
    entries = manager.read_entries()
    entries.pop(1)

    manager.write_entries(entries)

    assert out.getvalue() == "# comment\n10.0.0.5\tfoo.test bar.test\n"
    assert hosts_file.read_text().startswith("# comment\n127.0.0.1 localhost\n")


def test_failed_replace_leaves_original_and_cleans_up(hosts_file, logger, monkeypatch):
    original = hosts_file.read_text()
    manager = HostsFileManager(str(hosts_file), logger)

    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", broken_replace)

    with pytest.raises(OSError, match="disk full"):
        manager.write_entries([Record("10.0.0.1", ["a"])])

    assert hosts_file.read_text() == original
    assert [p.name for p in hosts_file.parent.iterdir()] == ["hosts"]


def test_non_utf8_bytes_survive_round_trip(tmp_path, logger):
    path = tmp_path / "hosts"
    path.write_bytes(b"# caf\xe9\n127.0.0.1 localhost\n")
    manager = HostsFileManager(str(path), logger)

    entries = manager.read_entries()
    manager.write_entries(entries)

    assert path.read_bytes() == b"# caf\xe9\n127.0.0.1\tlocalhost\n"


def test_debug_mode_writes_raw_bytes_to_buffer(tmp_path, logger):
    path = tmp_path / "hosts"
    path.write_bytes(b"# caf\xe9\n")
    raw = io.BytesIO()
    out = io.TextIOWrapper(raw, encoding="utf-8")
    manager = HostsFileManager(str(path), logger, debug=True, stdout=out)

    manager.write_entries(manager.read_entries())

    assert raw.getvalue() == b"# caf\xe9\n"


def test_write_through_symlink_updates_target(tmp_path, logger):
    real = tmp_path / "real_hosts"
    real.write_text("127.0.0.1 localhost\n")
    link = tmp_path / "hosts"
    link.symlink_to(real)
    manager = HostsFileManager(str(link), logger)

    entries = manager.read_entries()
    entries.insert(1, Record("10.0.0.1", ["a"]))
    manager.write_entries(entries)

    assert link.is_symlink()
    assert real.read_text() == "127.0.0.1\tlocalhost\n10.0.0.1\ta\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["hosts", "real_hosts"]
