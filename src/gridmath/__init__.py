# -*- coding: utf-8 -*-
"""Tolerance-aware comparisons and integer-grid plotting geometry for **gridmath**."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gridmath")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"
