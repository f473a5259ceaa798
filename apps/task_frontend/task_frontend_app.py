#!/usr/bin/env python3
"""
Task Frontend
Flask application rendering task pages from the remote task API
"""
import logging
import os

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from task_frontend.config.settings import FrontendConfig
from task_frontend.components.tasks import init_tasks
from task_frontend.routes import init_health

logger = logging.getLogger(__name__)


class TaskFrontendApp:
    """Main frontend application class"""

    def __init__(self, config_overrides=None):
        self.app = None
        self.limiter = None
        self.config_overrides = config_overrides or {}

    def create_app(self):
        """Create and configure Flask application"""
        template_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'templates')
        self.app = Flask(__name__, template_folder=template_dir)

        # Load configuration
        self.app.config.from_object(FrontendConfig)
        self.app.config.update(self.config_overrides)

        # Initialize extensions
        self.limiter = Limiter(
            key_func=get_remote_address,
            app=self.app,
            default_limits=[self.app.config['RATELIMIT_DEFAULT']],
            storage_uri=self.app.config['RATELIMIT_STORAGE_URI']
        )

        # Initialize components
        init_health(self.app, self.limiter)
        init_tasks(self.app)

        return self.app

    def run(self):
        """Start the frontend application"""
        config = self.app.config
        logging.basicConfig(
            level=config['LOG_LEVEL'],
            format='%(asctime)s %(levelname)s %(name)s: %(message)s'
        )

        logger.info("=" * 60)
        logger.info("Task Frontend")
        logger.info(f"Starting on: http://localhost:{config['PORT']}")
        logger.info(f"Task API:    {config['TASK_API_URL']}")
        logger.info("=" * 60)

        self.app.run(host=config['HOST'], port=config['PORT'], debug=False)


def create_app(config_overrides=None):
    """Build the Flask app; overrides are applied on top of FrontendConfig"""
    return TaskFrontendApp(config_overrides).create_app()


def main():
    """Main entry point"""
    frontend = TaskFrontendApp()
    frontend.create_app()
    frontend.run()


if __name__ == '__main__':
    main()
