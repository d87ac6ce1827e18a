"""
Application package initializer.

The API is organised in layers: ``repositories`` hold the SQL for each
table, ``services`` enforce the business rules and reshape rows, and
``api/v1/endpoints`` map HTTP requests onto service calls.  ``core``
contains configuration, logging, storage bootstrap and the error
taxonomy shared by all layers.
"""

from .main import app  # noqa: F401
