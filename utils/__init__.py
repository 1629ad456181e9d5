"""
utils/ - Shared Utilities
=========================
Cross-cutting helpers (logging).
"""
