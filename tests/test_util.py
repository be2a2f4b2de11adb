import pytest

from activitysync.util import find_remotes, find_remotes_nonlocal, get_remotes


@pytest.fixture
def sync_tree(tmp_path):
    root = tmp_path / "sync"
    (root / "device-aaa").mkdir(parents=True)
    (root / "device-aaa" / "test.db").write_text("a")
    (root / "device-bbb").mkdir()
    (root / "device-bbb" / "test.db").write_text("b")
    (root / "device-bbb" / "notes.txt").write_text("n")
    (root / "loose.db").write_text("x")
    return root


def test_find_remotes_lists_dbs_one_level_down(sync_tree):
    assert find_remotes(sync_tree) == [
        sync_tree / "device-aaa" / "test.db",
        sync_tree / "device-bbb" / "test.db",
    ]


def test_find_remotes_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        find_remotes(tmp_path / "absent")


def test_find_remotes_nonlocal_excludes_own_device(sync_tree):
    result = find_remotes_nonlocal(sync_tree, "device-aaa", None)
    assert result == [sync_tree / "device-bbb" / "test.db"]


def test_find_remotes_nonlocal_limits_to_sync_db(sync_tree):
    only = sync_tree / "device-aaa" / "test.db"
    assert find_remotes_nonlocal(sync_tree, "device-zzz", only) == [only]
    assert find_remotes_nonlocal(sync_tree, "device-aaa", only) == []


def test_find_remotes_nonlocal_limits_to_directory(sync_tree):
    result = find_remotes_nonlocal(sync_tree, "device-zzz", sync_tree / "device-bbb")
    assert result == [sync_tree / "device-bbb" / "test.db"]


def test_find_remotes_nonlocal_is_subset_of_all(sync_tree):
    everything = set(find_remotes(sync_tree))
    assert set(find_remotes_nonlocal(sync_tree, "device-zzz", None)) == everything


def test_get_remotes_only_hosts_with_device_dbs(monkeypatch, tmp_path):
    root = tmp_path / "root"
    (root / "host-a" / "device-1").mkdir(parents=True)
    (root / "host-a" / "device-1" / "test.db").write_text("x")
    (root / "host-b" / "device-2").mkdir(parents=True)
    (root / "host-c").mkdir()
    (root / "host-c" / "flat.db").write_text("x")
    monkeypatch.setenv("AW_SYNC_DIR", str(root))
    assert get_remotes() == ["host-a"]


def test_get_remotes_creates_sync_dir(monkeypatch, tmp_path):
    root = tmp_path / "fresh" / "sync"
    monkeypatch.setenv("AW_SYNC_DIR", str(root))
    assert get_remotes() == []
    assert root.is_dir()