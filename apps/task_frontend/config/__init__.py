"""
Frontend configuration
"""
from .settings import FrontendConfig

__all__ = ['FrontendConfig']
