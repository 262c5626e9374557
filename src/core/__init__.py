"""
Core domain models, calendar primitives, and contracts.

This module contains the foundational building blocks that are independent
of any presentation layer (DOM adapters, templates, etc.).
"""
