"""
rchan - PKGBUILD update checker and batch builder.

Run with no arguments to compare every vendored PKGBUILD against the remote
copy named in its rchan.yaml, or with `build` to build every PKGBUILD
directory with makepkg.
"""

__version__ = "0.1.0"
