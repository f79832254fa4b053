"""
Unit tests for models.py
"""
import gc

import pytest

from nanofs.models import Directory, File
from nanofs.permissions import Mode


def test_file_creation_defaults():
    """Test creating a File with default content and mode."""
    file = File("notes.txt")

    assert file.name == "notes.txt"
    assert file.kind == "file"
    assert file.is_directory is False
    assert file.content == ""
    assert file.mode is Mode.READ_WRITE
    assert file.readable is True
    assert file.writeable is True


def test_directory_creation():
    """Test creating a Directory with correct attributes."""
    root = Directory("/")
    child = Directory("docs", parent=root)

    assert root.kind == "directory"
    assert root.is_directory is True
    assert root.parent is None
    assert root.is_root is True
    assert child.parent is root
    assert child.is_root is False
    assert child.children == {}


@pytest.mark.parametrize("factory", [File, Directory])
def test_empty_name_rejected(factory):
    """Test that no node can be created with an empty name."""
    with pytest.raises(ValueError):
        factory("")


def test_lookup_is_exact_and_case_sensitive():
    """Test that child lookup only matches the exact name."""
    root = Directory("/")
    root.make_file("Readme")

    assert root.get("Readme") is not None
    assert root.get("readme") is None
    assert root.get("Read") is None


def test_make_directory_sets_parent():
    """Test that new subdirectories point back at their parent."""
    root = Directory("/")
    docs = root.make_directory("docs")

    assert root.get("docs") is docs
    assert docs.parent is root


def test_make_file_replaces_existing_entry():
    """Test that touch-style creation resets an existing file."""
    root = Directory("/")
    old = root.make_file("a")
    old.content = "data"
    old.set_mode(Mode.NONE)

    new = root.make_file("a")

    assert new is not old
    assert root.get("a") is new
    assert new.content == ""
    assert new.mode is Mode.READ_WRITE


def test_make_directory_replaces_file():
    """Test that a directory can replace a file of the same name."""
    root = Directory("/")
    root.make_file("x")
    root.make_directory("x")

    assert isinstance(root.get("x"), Directory)
    assert root.names() == ["x"]


def test_names_keep_insertion_order():
    """Test that listing follows creation order."""
    root = Directory("/")
    for name in ["zeta", "alpha", "mid"]:
        root.make_file(name)

    assert root.names() == ["zeta", "alpha", "mid"]


def test_remove_detaches_subtree():
    """Test removing a directory drops its descendants."""
    root = Directory("/")
    docs = root.make_directory("docs")
    docs.make_directory("deep").make_file("leaf")

    removed = root.remove("docs")

    assert removed is docs
    assert root.get("docs") is None
    assert root.names() == []


def test_remove_missing_returns_none():
    root = Directory("/")

    assert root.remove("ghost") is None


def test_rename_child_updates_name_and_key():
    """Test renaming keeps node identity and updates both name and key."""
    root = Directory("/")
    file = root.make_file("old")
    file.content = "kept"

    assert root.rename_child("old", "new") is True

    assert root.get("old") is None
    assert root.get("new") is file
    assert file.name == "new"
    assert file.content == "kept"


def test_rename_child_overwrites_target():
    """Test renaming onto an existing name replaces that entry."""
    root = Directory("/")
    source = root.make_file("a")
    root.make_directory("b")

    root.rename_child("a", "b")

    assert root.names() == ["b"]
    assert root.get("b") is source


def test_rename_child_missing_source():
    root = Directory("/")
    root.make_file("b")

    assert root.rename_child("a", "b") is False
    assert root.names() == ["b"]


def test_rename_child_same_name_is_noop():
    root = Directory("/")
    file = root.make_file("a")

    assert root.rename_child("a", "a") is True
    assert root.get("a") is file


def test_rename_child_rejects_empty_name():
    """Test that an empty target name leaves the tree unchanged."""
    root = Directory("/")
    root.make_file("a")

    with pytest.raises(ValueError):
        root.rename_child("a", "")

    assert root.names() == ["a"]
    assert root.get("a").name == "a"


def test_rename_directory_keeps_parent_link():
    root = Directory("/")
    docs = root.make_directory("docs")

    root.rename_child("docs", "papers")

    assert docs.name == "papers"
    assert docs.parent is root


def test_parent_link_is_weak():
    """Test that a child does not keep its parent alive."""
    parent = Directory("tmp")
    child = parent.make_directory("child")

    del parent
    gc.collect()

    assert child.parent is None
    assert child.is_root is False
