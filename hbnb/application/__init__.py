"""
Application Layer
=================

Use cases, the facade that sequences them, the concurrency guard and
the DTOs exchanged with callers.
"""
