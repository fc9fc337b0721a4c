"""
Core collections, domain models, and contracts.

This module contains the foundational building blocks that are independent
of external systems (storage, transports, etc.).
"""
