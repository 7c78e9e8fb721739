"""
Top‑level package for the Numbers API.

This file makes ``numbers_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``numbers_api.app.main``.  Tests import through this package from the
repository root.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
