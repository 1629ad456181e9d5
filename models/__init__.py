"""
models/ - Domain Models
=======================
Plain dataclasses for the catalog entities: Author, Genre and Book.
"""
