# config.py - resolves caller configuration into an immutable ReporterConfig
import socket
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Tuple

from .errors import ConfigurationError

DEFAULT_ENDPOINT = "https://api.appenlight.com/api/"


def _normalize_tags(tags) -> Tuple[Tuple[Any, Any], ...]:
    """Mapping or [key, value] pairs to a tuple of pairs. Malformed entries are skipped."""
    if not tags:
        return ()
    if isinstance(tags, Mapping):
        return tuple(tags.items())
    if isinstance(tags, (str, bytes)) or not isinstance(tags, Iterable):
        return ()
    return tuple(tuple(pair) for pair in tags
                 if isinstance(pair, (list, tuple)) and len(pair) == 2)


@dataclass(frozen=True)
class ReporterConfig:
    api_key: str
    endpoint: str = DEFAULT_ENDPOINT
    server_name: str = ""
    server: Optional[str] = None
    tags: Tuple[Tuple[Any, Any], ...] = ()

    @classmethod
    def resolve(cls, config, hostname_provider: Callable[[], str] = socket.gethostname):
        """
        Build a ReporterConfig from a mapping (or return an existing one).

        Recognized keys: api_key (required), endpoint, server_name, server, tags.
        The mapping is read, never modified. hostname_provider is only called
        when server_name is missing.
        """
        if isinstance(config, ReporterConfig):
            if not config.api_key:
                raise ConfigurationError("API Key is required")
            return config
        if not config or not config.get("api_key"):
            raise ConfigurationError("API Key is required")

        return cls(
            api_key=config["api_key"],
            endpoint=config.get("endpoint") or DEFAULT_ENDPOINT,
            server_name=config.get("server_name") or hostname_provider(),
            server=config.get("server") or None,
            tags=_normalize_tags(config.get("tags")),
        )
