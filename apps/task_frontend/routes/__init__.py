"""
Application-level routes
"""
from .health_routes import health_bp, init_health

__all__ = ['health_bp', 'init_health']
