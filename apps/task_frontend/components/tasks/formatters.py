"""
Display formatting for task fields
"""
from datetime import datetime

from markupsafe import Markup

STATUS_LABELS = {
    'IN_PROGRESS': 'In Progress',
    'TODO': 'To Do',
    'COMPLETED': 'Completed',
}

NO_STATUS_LABEL = 'No Task'

TASK_ACTIONS = Markup(
    '<a href="/tasks/{task_id}" class="govuk-link">View</a> |\n'
    '<a href="/tasks/{task_id}/edit" class="govuk-link">Edit</a> |\n'
    '<a href="/tasks/{task_id}?_method=DELETE" class="govuk-link">Delete</a>'
)


def format_status(status=None):
    """Map a status code to its label

    Unknown codes are shown as-is; a missing status shows 'No Task'.
    """
    if not status:
        return NO_STATUS_LABEL
    return STATUS_LABELS.get(status, status)


def local_timezone_name():
    """Name of the server's local time zone, e.g. 'UTC' or 'BST'"""
    return datetime.now().astimezone().tzname()


def format_due_date(due_date=None):
    """Render an ISO date-time as 'dd-MM-yyyy <time> <zone>'

    The time of day is kept exactly as the API sent it.
    """
    if not due_date:
        return ''

    date_part, _, time_part = due_date.partition('T')
    pieces = date_part.split('-')
    if len(pieces) != 3:
        return due_date

    yyyy, mm, dd = pieces
    formatted = f'{dd}-{mm}-{yyyy}'
    if time_part:
        formatted = f'{formatted} {time_part}'
    return f'{formatted} {local_timezone_name()}'


def create_task_actions(task_id=None):
    """View / Edit / Delete links for one task row"""
    if task_id is None or task_id == '':
        return ''
    # Markup.format escapes the id
    return TASK_ACTIONS.format(task_id=task_id)
