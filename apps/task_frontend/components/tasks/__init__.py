"""
Tasks Component
List, view, create, edit and delete tasks held by the remote task API
"""
from .routes import tasks_bp, init_tasks
from .service import TaskViewService

__all__ = ['tasks_bp', 'init_tasks', 'TaskViewService']
