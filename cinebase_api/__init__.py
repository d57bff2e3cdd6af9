"""
Top-level package for the CineBase API.

This file makes ``cinebase_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``cinebase_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
