"""
API module for PlaneDB.

Provides REST endpoints for registration and type lookups.
"""

from planedb.api.registry import registry_bp

__all__ = ['registry_bp']
