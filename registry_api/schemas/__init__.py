"""
Public Pydantic schemas used by FastAPI routes, services, and tests.

Schemas are grouped by area (location hierarchy, catalog, associations,
hierarchy trees, dashboard) and share the camelCase wire convention defined
in ``common.CamelModel``.
"""

from .common import MessageResponse, SuccessResponse  # noqa: F401
