"""Handle.net JSON REST API backend.

Talks to the ``/api/handles`` resource of a Handle server (version 8 or
later). Each operation is a single request authenticated with the handler's
Basic authorization header; failures are logged and reported as ``False`` or
``None``.
"""

from http import HTTPStatus
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import jmespath
import requests

from ..config import HandleConfig
from ..exceptions import HandleServiceError
from ..handler import HandleHandler, basic_authorization
from ..logging_config import get_logger
from ..registry import register_backend

logger = get_logger(__name__)

URL_VALUE_INDEX = 1
ADMIN_VALUE_INDEX = 100
ADMIN_PERMISSIONS = "011111110011"

# First URL value of a handle record
URL_VALUE_PATH = jmespath.compile("values[?type=='URL'].data.value | [0]")


def build_handle_values(target: str, admin_username: str) -> List[Dict[str, Any]]:
    """Handle record values pointing at ``target``.

    An HS_ADMIN value is added when the admin username has the
    "index:handle" form, e.g. "300:0.NA/1234567".
    """
    values: List[Dict[str, Any]] = [
        {
            "index": URL_VALUE_INDEX,
            "type": "URL",
            "data": {"format": "string", "value": target},
        }
    ]
    admin_index, _, admin_handle = admin_username.partition(":")
    if admin_index.isdigit() and admin_handle:
        values.append(
            {
                "index": ADMIN_VALUE_INDEX,
                "type": "HS_ADMIN",
                "data": {
                    "format": "admin",
                    "value": {
                        "handle": admin_handle,
                        "index": int(admin_index),
                        "permissions": ADMIN_PERMISSIONS,
                    },
                },
            }
        )
    return values


@register_backend("rest", "Handle.net JSON REST API")
class RestHandleHandler(HandleHandler):
    """Handle backend using the Handle.net REST API."""

    def __init__(
        self,
        config: HandleConfig,
        obj: Optional[Any] = None,
        prefix: Optional[str] = None,
    ):
        super().__init__(config, obj=obj, prefix=prefix)
        # Handle servers expect the "index:handle" username percent-encoded
        self.headers = {
            "Authorization": basic_authorization(
                quote(config.admin_username, safe=""), config.admin_password
            ),
            "Content-Type": "application/json;charset=UTF-8",
            "Accept": "application/json",
        }

    def handle_url(self, handle: str) -> str:
        """REST resource URL of ``handle``."""
        return (
            f"{self.config.service_url.rstrip('/')}/api/handles/"
            f"{quote(handle, safe='/:')}"
        )

    def _request(
        self,
        method: str,
        handle: str,
        params: Optional[Dict[str, str]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        url = self.handle_url(handle)
        logger.debug(f"{method} {url} params={params}")
        try:
            return requests.request(
                method,
                url,
                headers=self.headers,
                params=params,
                json=body,
                timeout=self.config.request_timeout,
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as e:
            raise HandleServiceError(f"{method} {url} failed: {e}") from e

    def _put_target(
        self, handle: str, target: str, overwrite: bool
    ) -> requests.Response:
        body = {"values": build_handle_values(target, self.config.admin_username)}
        params = {"overwrite": "true" if overwrite else "false"}
        return self._request("PUT", handle, params=params, body=body)

    def create_handle(self, obj: Any) -> bool:
        handle = self.get_full_handle(obj)
        target = self.construct_target_url(obj)
        try:
            response = self._put_target(handle, target, overwrite=False)
        except HandleServiceError as e:
            logger.error(f"Unable to create Handle {handle}: {e}")
            return False

        if response.status_code == HTTPStatus.CREATED:
            logger.info(f"Created Handle {handle} pointing at {target}")
            return True
        logger.error(
            f"Handle service refused to create {handle}: "
            f"{response.status_code} {response.text}"
        )
        return False

    def read_handle(self, handle_or_obj: Any) -> Optional[str]:
        handle = self.get_full_handle(handle_or_obj)
        try:
            response = self._request("GET", handle, params={"type": "URL"})
        except HandleServiceError as e:
            logger.error(f"Unable to read Handle {handle}: {e}")
            return None

        if response.status_code != HTTPStatus.OK:
            logger.debug(f"Handle {handle} not found: {response.status_code}")
            return None
        try:
            target = URL_VALUE_PATH.search(response.json())
        except ValueError:
            logger.error(f"Handle service returned invalid JSON for {handle}")
            return None
        return target or None

    def update_handle(self, handle_or_obj: Any, target: str) -> bool:
        handle = self.get_full_handle(handle_or_obj)
        try:
            response = self._put_target(handle, target, overwrite=True)
        except HandleServiceError as e:
            logger.error(f"Unable to update Handle {handle}: {e}")
            return False

        if response.status_code in (HTTPStatus.OK, HTTPStatus.CREATED):
            logger.info(f"Updated Handle {handle} to point at {target}")
            return True
        logger.error(
            f"Handle service refused to update {handle}: "
            f"{response.status_code} {response.text}"
        )
        return False

    def delete_handle(self, handle_or_obj: Any) -> bool:
        handle = self.get_full_handle(handle_or_obj)
        try:
            response = self._request("DELETE", handle)
        except HandleServiceError as e:
            logger.error(f"Unable to delete Handle {handle}: {e}")
            return False

        if response.status_code == HTTPStatus.OK:
            logger.info(f"Deleted Handle {handle}")
            return True
        logger.error(
            f"Handle service refused to delete {handle}: "
            f"{response.status_code} {response.text}"
        )
        return False
