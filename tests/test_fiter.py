import os

import pytest

from negi.fiter import File, FiterFlag, fiter


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.txt").write_text("alpha")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.txt").write_text("beta")
    deep = sub / "deep"
    deep.mkdir()
    (deep / "c.txt").write_text("gamma")
    return tmp_path


def _subps(files):
    return [f.subp for f in files]


def test_default_lists_regular_files_only(tree):
    got = set(_subps(fiter(tree)))
    assert got == {
        "a.txt",
        os.path.join("sub", "b.txt"),
        os.path.join("sub", "deep", "c.txt"),
    }


def test_files_are_regular_and_paths_consistent(tree):
    for f in fiter(tree):
        assert f.is_reg
        assert f.path == os.path.join(str(tree), f.subp)
        assert f.name == os.path.basename(f.path)
        assert f.st is None
        assert f.fd == -1


def test_list_dir_yields_dirs_before_contents(tree):
    files = list(fiter(tree, FiterFlag.LIST_DIR))
    subps = _subps(files)
    assert files[0].subp == ""
    assert files[0].is_dir
    assert subps.index("sub") < subps.index(os.path.join("sub", "b.txt"))
    assert subps.index(os.path.join("sub", "deep")) < subps.index(
        os.path.join("sub", "deep", "c.txt")
    )


def test_recur_dir_yields_dirs_after_contents(tree):
    files = list(fiter(tree, FiterFlag.RECUR_DIR))
    subps = _subps(files)
    assert files[-1].subp == ""
    assert files[-1].is_dir
    assert subps.index(os.path.join("sub", "deep", "c.txt")) < subps.index(
        os.path.join("sub", "deep")
    )
    assert subps.index(os.path.join("sub", "deep")) < subps.index("sub")


def test_recur_dir_allows_deletion(tree):
    for f in fiter(tree, FiterFlag.RECUR_DIR):
        if f.is_dir:
            os.rmdir(f.path)
        else:
            os.remove(f.path)
    assert not tree.exists()


def test_list_dir_only(tree):
    files = list(fiter(tree, FiterFlag.LIST_DIR_ONLY))
    assert all(f.is_dir for f in files)
    assert set(_subps(files)) == {"", "sub", os.path.join("sub", "deep")}


def test_no_reg_excludes_files(tree):
    assert list(fiter(tree, FiterFlag.NO_REG)) == []


def test_use_stat(tree):
    sizes = {f.name: f.st.st_size for f in fiter(tree, FiterFlag.USE_STAT)}
    assert sizes == {
        "a.txt": len("alpha"),
        "b.txt": len("beta"),
        "c.txt": len("gamma"),
    }


def test_use_fd_reads_content(tree):
    contents = {f.name: os.read(f.fd, 100) for f in fiter(tree, FiterFlag.USE_FD)}
    assert contents["a.txt"] == b"alpha"
    assert contents["c.txt"] == b"gamma"


def test_symlinks(tree):
    os.symlink(tree / "a.txt", tree / "link")
    links = [f for f in fiter(tree) if f.is_link]
    assert [f.name for f in links] == ["link"]
    assert all(not f.is_link for f in fiter(tree, FiterFlag.NO_LNK))


def test_both_dir_modes_rejected(tree):
    with pytest.raises(ValueError):
        fiter(tree, FiterFlag.LIST_DIR | FiterFlag.RECUR_DIR)


def test_dir_only_without_listing_rejected(tree):
    with pytest.raises(ValueError):
        fiter(tree, FiterFlag.NO_UNK | FiterFlag.NO_LNK | FiterFlag.NO_REG)


def test_missing_root(tmp_path):
    with pytest.raises(FileNotFoundError):
        fiter(tmp_path / "missing")


def test_root_must_be_directory(tree):
    with pytest.raises(NotADirectoryError):
        fiter(tree / "a.txt")


def test_file_kind_properties():
    f = File(path="x", subp="x", name="x", mode=0o040000)
    assert f.is_dir
    assert not f.is_reg
    assert not f.is_link