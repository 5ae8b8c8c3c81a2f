"""
Repository layer for data access.

Repositories encapsulate SQLAlchemy queries for each entity of the registry
(location hierarchy, catalog, associations). They operate on the request's
AsyncSession (see registry_api.core.deps.get_session).
"""
