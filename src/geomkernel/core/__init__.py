"""
Core math kernel, domain models, and contracts.

This module contains the building blocks consumed by the geometry and
rendering layers; it has no dependency on either of them.
"""
