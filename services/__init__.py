"""
services/ - Business Logic Layer
================================
Catalog use cases built on top of the repositories.
"""
