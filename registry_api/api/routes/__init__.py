"""
API route modules for the maintenance registry.

One subrouter per resource (bases, workshops, equipment types, equipment,
components, spare parts, suppliers, associations) plus the hierarchy,
dashboard and reports views.

Routers are included from registry_api.api.main (under the /api prefix).
"""
