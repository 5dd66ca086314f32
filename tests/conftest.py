"""Shared test fixtures and utilities."""

import os
from pathlib import Path

import pytest


@pytest.fixture
def write_file(tmp_path):
    """Factory fixture to write files relative to tmp_path."""
    def _write(path: str, content="test content"):
        file_path = tmp_path / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            file_path.write_bytes(content)
        else:
            file_path.write_text(content)
        return file_path
    return _write


@pytest.fixture
def sample_tree(tmp_path, write_file):
    """Root with a.txt ("hello") and sub/b.txt ("world")."""
    write_file("a.txt", "hello")
    write_file("sub/b.txt", "world")
    return tmp_path


@pytest.fixture
def deny_open(monkeypatch):
    """Make opening files with a given name fail with PermissionError.

    Running as root ignores chmod, so unreadable files are simulated.
    """
    def _deny(name: str):
        real_open = Path.open

        def fake_open(self, *args, **kwargs):
            if self.name == name:
                raise PermissionError(13, "Permission denied", str(self))
            return real_open(self, *args, **kwargs)

        monkeypatch.setattr(Path, "open", fake_open)
    return _deny


@pytest.fixture
def deny_listing(monkeypatch):
    """Make listing a directory with a given name fail with PermissionError."""
    def _deny(name: str):
        real_scandir = os.scandir

        def fake_scandir(path="."):
            if os.path.basename(os.fspath(path)) == name:
                raise PermissionError(13, "Permission denied", os.fspath(path))
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", fake_scandir)
    return _deny


@pytest.fixture
def deny_stat(monkeypatch):
    """Make stat of entries with a given name fail with PermissionError.

    This is what a listable but unsearchable directory (mode 0o644) does
    to every entry inside it.
    """
    def _deny(name: str):
        real_stat = os.stat

        def fake_stat(path, *args, **kwargs):
            if os.path.basename(os.fspath(path)) == name:
                raise PermissionError(13, "Permission denied", os.fspath(path))
            return real_stat(path, *args, **kwargs)

        monkeypatch.setattr(os, "stat", fake_stat)
    return _deny


@pytest.fixture
def deny_read(monkeypatch):
    """Make files with a given name report no read permission."""
    def _deny(name: str):
        real_access = os.access

        def fake_access(path, mode, *args, **kwargs):
            if os.path.basename(os.fspath(path)) == name and mode & os.R_OK:
                return False
            return real_access(path, mode, *args, **kwargs)

        monkeypatch.setattr(os, "access", fake_access)
    return _deny
