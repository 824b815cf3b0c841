"""Shared fixtures for rchan tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def make_package(tmp_path):
    """Create a package directory under tmp_path with optional files."""

    def _make(name, pkgbuild=None, remote=None, rchan_yaml=None):
        pkg_dir = tmp_path / name
        pkg_dir.mkdir()
        if pkgbuild is not None:
            (pkg_dir / "PKGBUILD").write_text(pkgbuild, encoding="utf-8")
        if rchan_yaml is not None:
            (pkg_dir / "rchan.yaml").write_text(rchan_yaml, encoding="utf-8")
        elif remote is not None:
            (pkg_dir / "rchan.yaml").write_text(f"remote_pkgbuild: {remote}\n", encoding="utf-8")
        return pkg_dir

    return _make
