"""Maintenance registry API: bases, workshops, equipment, components and spare parts."""
