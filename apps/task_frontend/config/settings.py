"""
Frontend configuration settings
"""
import os


def _env_flag(name, default):
    """Read a boolean flag from the environment"""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_timeout(name):
    """Read an optional timeout in seconds; unset means the client default"""
    value = os.environ.get(name)
    if not value:
        return None
    return float(value)


class FrontendConfig:
    """Centralized configuration for the task frontend"""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'your-secret-key-here-change-in-production')

    # Server settings
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 3100))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Remote task API
    TASK_API_URL = os.environ.get('TASK_API_URL', 'http://localhost:4000')
    TASK_API_TIMEOUT = _env_timeout('TASK_API_TIMEOUT')

    # Rate limiting
    RATELIMIT_ENABLED = _env_flag('RATELIMIT_ENABLED', True)
    RATELIMIT_DEFAULT = "100 per minute"
    RATELIMIT_STORAGE_URI = "memory://"

    # Status codes accepted by the task API, in form display order
    TASK_STATUSES = ['TODO', 'IN_PROGRESS', 'COMPLETED']
