"""Minimal Dropbox HTTP API client using requests."""

import logging

import requests

from .errors import DeleteError, ReadError

logger = logging.getLogger(__name__)

API_URL = 'https://api.dropboxapi.com/2'
DEFAULT_TIMEOUT = 60


class DropboxClient:
    """Posts JSON RPC calls to the Dropbox API with a bearer token.

    One client is shared by the reader and the deleter of a run.
    """

    def __init__(self, token: str, session: requests.Session | None = None, timeout: float = DEFAULT_TIMEOUT):
        self.session = session or requests.Session()
        self.session.headers.update({"Authorization": f"Bearer {token}"})
        self.timeout = timeout

    def _call(self, endpoint: str, payload: dict, error_cls: type[Exception]) -> dict:
        url = f"{API_URL}/{endpoint}"
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise error_cls(f"dbx {endpoint}: {e}") from e

        if not response.ok:
            raise error_cls(f"dbx {endpoint}: {response.status_code} - {response.text}")
        try:
            return response.json()
        except ValueError as e:
            raise error_cls(f"dbx {endpoint}: invalid JSON response: {e}") from e

    def list_folder(self, path: str) -> dict:
        """Returns the raw list_folder result (entries, cursor, has_more)."""
        return self._call('files/list_folder', {"path": path}, ReadError)

    def delete(self, path: str) -> dict:
        return self._call('files/delete_v2', {"path": path}, DeleteError)

    def close(self) -> None:
        self.session.close()
