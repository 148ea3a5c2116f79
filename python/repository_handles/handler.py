"""Abstract Handle handler.

A handler is built per operation, optionally bound to one repository object,
and exposes four backend operations (create, read, update, delete) that
concrete subclasses implement against a specific Handle service. URL and
handle construction and metadata stamping are shared by every backend.
"""

import base64
from abc import ABC, abstractmethod
from typing import Any, Optional

from .config import HandleConfig
from .constants import HANDLE_RESOLVER_URL
from .logging_config import get_logger
from .metadata import append_handle
from .models import MetadataOutcome, ObjectHandle, to_handle_ref
from .urls import build_target_url

logger = get_logger(__name__)


def basic_authorization(username: str, password: str) -> str:
    """Value of an HTTP Basic ``Authorization`` header."""
    token = base64.b64encode(f"{username}:{password}".encode("utf-8"))
    return f"Basic {token.decode('ascii')}"


class HandleHandler(ABC):
    """Base class for Handle backends.

    Attributes:
        config: Deployment configuration
        prefix: Handle namespace for handles minted by this instance
        pid: Identifier of the bound object, if any
        authorization_header: Basic credentials for the Handle service
    """

    def __init__(
        self,
        config: HandleConfig,
        obj: Optional[Any] = None,
        prefix: Optional[str] = None,
    ):
        self.config = config
        self.prefix = prefix or config.prefix
        self.pid: Optional[str] = None
        self._target_url: Optional[str] = None
        self.authorization_header = basic_authorization(
            config.admin_username, config.admin_password
        )
        if obj is not None:
            self.construct_target_url(obj)
            self.pid = str(obj.id)

        logger.debug(
            f"Initialized {self.__class__.__name__} with prefix {self.prefix}"
        )

    @property
    def target_url(self) -> Optional[str]:
        """Target URL memoized by the first construct_target_url call."""
        return self._target_url

    def construct_target_url(self, obj_or_id: Any) -> str:
        """URL the handle resolves to, computed once per handler instance."""
        if self._target_url is None:
            object_id = obj_or_id if isinstance(obj_or_id, str) else obj_or_id.id
            self._target_url = build_target_url(str(object_id), self.config)
            logger.debug(f"Target URL for {object_id}: {self._target_url}")
        return self._target_url

    def construct_suffix(self, obj: Any) -> str:
        """Suffix of the handle for ``obj``, the object identifier by default."""
        return str(obj.id)

    def get_full_handle(self, handle_or_obj: Any) -> str:
        """Full "prefix/suffix" handle; handle strings are returned unchanged."""
        ref = to_handle_ref(handle_or_obj)
        if isinstance(ref, ObjectHandle):
            return f"{self.prefix}/{self.construct_suffix(ref.obj)}"
        return ref.value

    def get_handle_metadata_value(self, obj: Any) -> str:
        """Resolvable handle URL for embedding into metadata."""
        return f"{HANDLE_RESOLVER_URL}/{self.get_full_handle(obj)}"

    def append_handle_to_metadata(
        self, obj: Any, datastream_name: str, xsl_location: str
    ) -> MetadataOutcome:
        """Stamp this object's handle into a datastream via an XSLT stylesheet.

        Args:
            obj: Repository object owning the datastream
            datastream_name: Name of the metadata datastream, e.g. "MODS"
            xsl_location: Path or URL of a stylesheet accepting ``handle_value``

        Returns:
            MetadataOutcome; the datastream is written only if its content changed
        """
        return append_handle(
            obj,
            datastream_name,
            xsl_location,
            self.get_handle_metadata_value(obj),
        )

    @abstractmethod
    def create_handle(self, obj: Any) -> bool:
        """Mint a handle for ``obj`` pointing at its target URL."""
        ...

    @abstractmethod
    def read_handle(self, handle_or_obj: Any) -> Optional[str]:
        """Target URL currently registered for a handle, None if not found."""
        ...

    @abstractmethod
    def update_handle(self, handle_or_obj: Any, target: str) -> bool:
        """Repoint an existing handle at ``target``."""
        ...

    @abstractmethod
    def delete_handle(self, handle_or_obj: Any) -> bool:
        """Remove a handle registration."""
        ...
