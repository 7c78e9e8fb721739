"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings, logging, session access), ``schemas``
(Pydantic payloads), ``services`` (business logic) and ``api`` (HTTP
routes).
"""

from .main import app  # noqa: F401
