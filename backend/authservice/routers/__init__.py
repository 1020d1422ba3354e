"""
API Routers module.
"""
from authservice.routers import auth, health

__all__ = ["auth", "health"]
