import pytest

from vfsterm.directory import Directory


@pytest.fixture
def root():
    return Directory("V/")


def test_pwd_returns_name(root):
    assert root.pwd() == "V/"


def test_mkdir_and_chdir(root):
    root.mkdir("V/a/")
    assert root.dir_exists("V/a/")
    child = root.chdir("V/a/")
    assert child.pwd() == "V/a/"
    assert child.chdir("..") is root
    assert child.dir_exists("..")


def test_chdir_missing_returns_none(root):
    assert root.chdir("V/nope/") is None


def test_get_dir_missing_raises(root):
    with pytest.raises(KeyError):
        root.get_dir("V/nope/")


def test_get_dir_returns_child(root):
    child = root.mkdir("V/a/")
    assert root.get_dir("V/a/") is child


def test_rmdir_removes_directory(root):
    root.mkdir("V/a/")
    root.rmdir("V/a/")
    assert not root.dir_exists("V/a/")


def test_rmdir_missing_is_harmless(root):
    root.rmdir("V/nope/")
    assert not root.dir_exists("V/nope/")


def test_rmdir_releases_files_below(root):
    root.register_file("V/f")
    original = root.get_file("V/f")
    before = original.ref_count()
    sub = root.mkdir("V/a/")
    sub.mkdir("V/a/b/").link_file("V/a/b/g", original)
    assert original.ref_count() == before + 1
    root.rmdir("V/a/")
    assert original.ref_count() == before


def test_register_file_does_not_overwrite(root):
    root.register_file("V/f")
    root.get_file("V/f").write(0, "x")
    root.register_file("V/f")
    assert root.get_file("V/f").cat() == "x"


def test_file_exists_and_remove(root):
    root.register_file("V/f")
    assert root.file_exists("V/f")
    root.remove_file("V/f")
    assert not root.file_exists("V/f")
    root.remove_file("V/f")
    assert not root.file_exists("V/f")


def test_get_file_missing_raises(root):
    with pytest.raises(KeyError):
        root.get_file("V/f")


def test_link_file_shares_content_and_counts(root):
    root.register_file("V/f")
    f = root.get_file("V/f")
    before = f.ref_count()
    root.link_file("V/g", f)
    g = root.get_file("V/g")
    assert f.ref_count() == before + 1
    g.write(0, "z")
    assert f.cat() == "z"
    root.remove_file("V/g")
    assert f.ref_count() == before


def test_link_file_keeps_existing_name(root):
    root.register_file("V/f")
    root.register_file("V/g")
    f = root.get_file("V/f")
    before = f.ref_count()
    root.link_file("V/g", f)
    assert f.ref_count() == before
    assert root.get_file("V/g") is not f
    root.get_file("V/g").write(0, "q")
    assert f.cat() == ""


def test_ls_lists_files_then_dirs_without_parent(root):
    root.register_file("V/f")
    child = root.mkdir("V/a/")
    assert root.ls() == "V/:\nV/f V/a/ \n"
    assert child.ls() == "V/a/:\n\n"


def test_lproot_is_breadth_first_with_ref_counts(root):
    root.register_file("V/f")
    f = root.get_file("V/f")
    a = root.mkdir("V/a/")
    root.mkdir("V/b/")
    a.mkdir("V/a/c/")
    a.link_file("V/a/g", f)
    n = f.ref_count()
    expected = (
        "V/:\n"
        f"V/f {n}\n"
        "V/a/:\n"
        f"V/a/g {n}\n"
        "V/b/:\n"
        "V/a/c/:\n"
    )
    assert root.lproot() == expected


def test_mkdir_replacing_releases_old_contents(root):
    root.register_file("V/f")
    f = root.get_file("V/f")
    before = f.ref_count()
    root.mkdir("V/a/").link_file("V/a/g", f)
    new = root.mkdir("V/a/")
    assert f.ref_count() == before
    assert not new.file_exists("V/a/g")