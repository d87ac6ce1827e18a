"""
Top-level package for the Astronaut API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``astronaut_api.app.main:app``.
"""

__all__ = []
