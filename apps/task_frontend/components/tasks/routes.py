"""
Task Routes
HTML views that proxy list/view/create/edit/delete operations to the task API
"""
import logging

from flask import Blueprint, current_app, redirect, render_template, request, url_for

from task_frontend.core.task_api import TaskApiClient, TaskApiError
from .formatters import format_status
from .service import TaskViewService

logger = logging.getLogger(__name__)

tasks_bp = Blueprint('tasks', __name__)

service = TaskViewService()

OVERRIDE_FIELD = '_method'


def _task_api():
    """Task API client configured for the current app"""
    return current_app.extensions['task_api']


def _submitted_data():
    """Form fields of the current request, falling back to a JSON body"""
    if request.form:
        return request.form.to_dict()
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _render_home(rows=None, error=None, task=None, status_code=200):
    return render_template('home.html', rows=rows or [], error=error, task=task), status_code


@tasks_bp.app_context_processor
def inject_task_helpers():
    """Make status choices available to every template"""
    return {
        'task_statuses': current_app.config['TASK_STATUSES'],
        'format_status': format_status,
    }


@tasks_bp.route('/')
def list_tasks():
    """Home page: every task, ordered by id"""
    try:
        tasks = _task_api().list_tasks()
    except TaskApiError as e:
        logger.warning("Failed to list tasks: %s", e)
        return _render_home(error=f'Failed to get task/s {e}')

    if not service.is_task_list(tasks):
        logger.warning("Task API returned a non-list payload for /tasks")
        return _render_home(error='Tasks data is invalid')

    return _render_home(rows=service.build_rows(tasks))


@tasks_bp.route('/tasks/new')
def new_task():
    """Empty form for a new task"""
    return render_template('task-form.html', task=None)


@tasks_bp.route('/tasks/<task_id>/edit')
def edit_task(task_id):
    """Form populated with an existing task; 404 if it cannot be fetched"""
    try:
        task = _task_api().get_task(task_id)
        if not task:
            raise TaskApiError('Task not found', status_code=404)
    except TaskApiError as e:
        logger.warning("Failed to load task %s for editing: %s", task_id, e)
        return render_template('not-found.html', message=f'Failed to edit task - {e}'), 404

    return render_template('task-form.html', task=task)


@tasks_bp.route('/tasks', methods=['POST'])
def create_task():
    """Create a task from the new-task form, then go back home"""
    form = _submitted_data()
    try:
        payload = service.build_create_payload(form)
        _task_api().create_task(payload)
    except (TaskApiError, ValueError) as e:
        logger.warning("Failed to create task: %s", e)
        return _render_home(task=form, error=service.describe_create_error(e))

    return redirect(url_for('tasks.list_tasks'))


@tasks_bp.route('/tasks/<task_id>', methods=['GET'])
def view_task(task_id):
    """Details page for a single task"""
    try:
        task = _task_api().get_task(task_id)
        if not isinstance(task, dict):
            raise TaskApiError('Task not found', status_code=404)
    except TaskApiError as e:
        logger.warning("Failed to fetch task %s: %s", task_id, e)
        return render_template(
            'not-found.html',
            message=f"Failed to fetch task by ID', {task_id} - {e}"
        )

    return render_template('task-details.html', task=service.format_task(task))


@tasks_bp.route('/tasks/<task_id>', methods=['PATCH'])
def update_task_status(task_id):
    """Change a task's status"""
    data = _submitted_data()
    try:
        _task_api().update_task_status(task_id, data.get('status'))
    except TaskApiError as e:
        logger.warning("Failed to update task %s: %s", task_id, e)
        task = {key: value for key, value in data.items() if key != OVERRIDE_FIELD}
        task['id'] = task_id
        return render_template('task-form.html', task=task, error=f'Failed to update task - {e}')

    return redirect(url_for('tasks.list_tasks'))


@tasks_bp.route('/tasks/<task_id>', methods=['DELETE'])
def delete_task(task_id):
    """Delete a task"""
    try:
        _task_api().delete_task(task_id)
    except TaskApiError as e:
        logger.warning("Failed to delete task %s: %s", task_id, e)
        return _render_home(error=f'Failed to delete task - {e}')

    return redirect(url_for('tasks.list_tasks'))


@tasks_bp.route('/tasks/<task_id>', methods=['POST'])
def override_task_method(task_id):
    """HTML forms can only POST; dispatch on the _method override field"""
    data = _submitted_data()
    method = str(data.get(OVERRIDE_FIELD) or request.args.get(OVERRIDE_FIELD) or '').upper()

    handlers = {
        'DELETE': delete_task,
        'PATCH': update_task_status,
    }
    handler = handlers.get(method)
    if handler is None:
        logger.warning("Unsupported method override %r for task %s", method, task_id)
        return render_template(
            'not-found.html',
            message=f'Method not allowed for task {task_id}'
        ), 405

    return handler(task_id)


def init_tasks(app):
    """Initialize tasks component with Flask app"""
    app.extensions['task_api'] = TaskApiClient(
        app.config['TASK_API_URL'],
        timeout=app.config.get('TASK_API_TIMEOUT')
    )
    app.register_blueprint(tasks_bp)
    return tasks_bp
