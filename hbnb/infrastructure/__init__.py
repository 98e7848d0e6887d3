"""
Infrastructure Layer
====================

Concrete repository implementations (in-memory, MongoDB) and the
credential hashing collaborator.
"""
