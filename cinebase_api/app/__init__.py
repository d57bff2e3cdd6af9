"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Routes live in ``api/endpoints``, business rules in
``services``, request/response models in ``schemas`` and the
in-memory store, configuration and logging setup in ``core``.
"""

from .main import app  # noqa: F401
