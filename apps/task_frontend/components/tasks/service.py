"""
Task View Service
Turns task API payloads into view data and form submissions into API payloads
"""
import math
from datetime import datetime, timedelta, timezone

from .formatters import create_task_actions, format_due_date, format_status

DEFAULT_STATUS = 'TODO'
CREATE_FAILED = 'Failed to create task'
CONNECTION_REFUSED = 'Connection Refused'


def _id_sort_key(task):
    """Numeric ids sort numerically and ahead of any non-numeric ids"""
    task_id = task.get('id')
    try:
        number = float(task_id)
    except (TypeError, ValueError):
        number = None
    if number is None or not math.isfinite(number):
        return (1, 0.0, str(task_id))
    return (0, number, '')


def _has_id(task_id):
    return task_id is not None and task_id != ''


def _date_field(form, name):
    """Read one of the due-date form fields as an int"""
    return int(str(form.get(name, '')).strip())


def to_iso_timestamp(value):
    """Render a naive local datetime as a UTC timestamp with milliseconds"""
    utc = value.astimezone(timezone.utc)
    return f"{utc.strftime('%Y-%m-%dT%H:%M:%S')}.{utc.microsecond // 1000:03d}Z"


class TaskViewService:
    """Service for the tasks component"""

    placeholder_row = [
        {'text': 'N/A'},
        {'text': 'No tasks available'},
        {'text': ''},
        {'text': ''},
        {'text': ''},
        {'text': ''},
    ]

    @staticmethod
    def is_task_list(data):
        """True if the API returned a list of task objects"""
        return isinstance(data, list) and all(isinstance(task, dict) for task in data)

    def build_rows(self, tasks):
        """Build the home table rows, ordered by id ascending"""
        if not tasks:
            return [list(self.placeholder_row)]

        rows = []
        for task in sorted(tasks, key=_id_sort_key):
            task_id = task.get('id')
            rows.append([
                {'text': task_id if _has_id(task_id) else 'N/A'},
                {'text': task.get('title') or ''},
                {'text': task.get('description') or ''},
                {'text': format_due_date(task.get('dueDate'))},
                {'text': format_status(task.get('status'))},
                {'html': create_task_actions(task_id)},
            ])
        return rows

    def format_task(self, task):
        """Copy of a task with its fields ready for the details view"""
        formatted = dict(task)
        formatted['title'] = task.get('title') or ''
        formatted['description'] = task.get('description') or ''
        formatted['status'] = format_status(task.get('status'))
        formatted['dueDate'] = format_due_date(task.get('dueDate'))
        return formatted

    def build_create_payload(self, form, now=None):
        """Build the POST /tasks body from the new-task form

        The due date is the chosen day at the current time plus one hour,
        expressed in UTC. No day means no due date.

        Raises ValueError if the date fields do not form a valid date.
        """
        due_date = None
        if form.get('due-date-day'):
            now = now or datetime.now()
            day = datetime(
                _date_field(form, 'due-date-year'),
                _date_field(form, 'due-date-month'),
                _date_field(form, 'due-date-day'),
            )
            try:
                due = day + timedelta(hours=now.hour + 1, minutes=now.minute, seconds=now.second)
                due_date = to_iso_timestamp(due)
            except OverflowError as e:
                raise ValueError(str(e)) from e

        return {
            'title': form.get('title'),
            'description': form.get('description'),
            'status': form.get('status') or DEFAULT_STATUS,
            'dueDate': due_date,
        }

    def describe_create_error(self, error):
        """Message shown on the home page when creating a task fails"""
        headline = CREATE_FAILED
        if getattr(error, 'connection_refused', False):
            headline = CONNECTION_REFUSED

        details = getattr(error, 'details', None)
        if details:
            due_date_detail = details.get('dueDate') if isinstance(details, dict) else None
            headline = due_date_detail or error.payload.get('error') or headline

        return f'{headline} {error}'
