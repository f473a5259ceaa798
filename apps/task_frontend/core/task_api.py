"""
Task API client
Thin HTTP client for the remote task service's /tasks endpoints
"""
import logging

import requests

logger = logging.getLogger(__name__)


class TaskApiError(Exception):
    """Raised when a call to the task API fails for any reason"""

    def __init__(self, message, status_code=None, payload=None, connection_refused=False):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload
        self.connection_refused = connection_refused

    @property
    def details(self):
        """Validation details carried by the error body, if any"""
        if isinstance(self.payload, dict):
            return self.payload.get('details')
        return None


class TaskApiClient:
    """Client for the task API

    Every method makes exactly one request. Failures are raised as
    TaskApiError; successful calls return the decoded JSON body or None.
    """

    def __init__(self, base_url, timeout=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def list_tasks(self):
        """GET /tasks"""
        return self._request('GET', '/tasks')

    def get_task(self, task_id):
        """GET /tasks/<id>"""
        return self._request('GET', f'/tasks/{task_id}')

    def create_task(self, payload):
        """POST /tasks"""
        return self._request('POST', '/tasks', json=payload)

    def update_task_status(self, task_id, status):
        """PATCH /tasks/<id> with the new status"""
        return self._request('PATCH', f'/tasks/{task_id}', json={'status': status})

    def delete_task(self, task_id):
        """DELETE /tasks/<id>"""
        return self._request('DELETE', f'/tasks/{task_id}')

    def _url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method, path, **kwargs):
        """Send a request and map every failure onto TaskApiError"""
        url = self._url(path)
        logger.debug("Task API request: %s %s", method, url)

        try:
            response = requests.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.Timeout as e:
            raise TaskApiError(f'Task API timed out: {e}') from e
        except requests.exceptions.ConnectionError as e:
            raise TaskApiError(
                f'connect ECONNREFUSED {self.base_url}',
                connection_refused=True
            ) from e
        except requests.exceptions.RequestException as e:
            raise TaskApiError(str(e)) from e

        body = self._decode(response)
        if response.status_code >= 400:
            raise TaskApiError(
                f'Request failed with status code {response.status_code}',
                status_code=response.status_code,
                payload=body
            )
        return body

    @staticmethod
    def _decode(response):
        """Decode a JSON body; empty or non-JSON bodies decode to None"""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None
