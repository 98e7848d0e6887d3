"""
Database Infrastructure
=======================

Repository implementations: in-memory (reference) and MongoDB.
"""
