"""
Core services shared by frontend components
"""
from .task_api import TaskApiClient, TaskApiError

__all__ = ['TaskApiClient', 'TaskApiError']
