"""
HBnB Domain Consistency Core
============================

Facade, entity validation and integrity rules sitting between a
presentation layer and a persistence layer.
"""
