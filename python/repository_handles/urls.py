"""Target URL computation for handles."""

from typing import Optional

from .config import HandleConfig


def join_url(host: str, path: str) -> str:
    """Join a host and a path with exactly one slash between them."""
    return f"{host.rstrip('/')}/{path.lstrip('/')}"


def object_path(object_id: str, config: HandleConfig) -> str:
    """Repository-relative path of an object, aliased only when enabled."""
    path = f"{config.objects_path.strip('/')}/{object_id}"
    if config.use_alias:
        return config.path_aliases.get(path, path)
    return path


def build_target_url(
    object_id: str, config: HandleConfig, host: Optional[str] = None
) -> str:
    """Build the URL a handle for ``object_id`` resolves to.

    Args:
        object_id: Identifier of the repository object
        config: Deployment configuration
        host: Host overriding both alternate_host and site_url

    Returns:
        Absolute URL against the alternate host when configured, otherwise
        against the local site URL
    """
    base = host or config.alternate_host or config.site_url
    return join_url(base, object_path(object_id, config))
