"""Domain layer for lifetrack application.

Services are imported from their modules (e.g. ``lifetrack.domain.dashboard``)
so that the database layer can import entities without pulling in services.
"""
