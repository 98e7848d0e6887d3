"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: frozen records for users, places, reviews and amenities
- Validation: pure field and entity validators
- Rules: cross-entity checks and the rating formula
- Repository Interfaces: Abstract contracts for data access
"""
