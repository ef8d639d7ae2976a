"""
Domain Layer - Webinar entity, domain errors and repository ports.

This layer has no dependency on frameworks or infrastructure.
"""
