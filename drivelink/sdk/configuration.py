"""Endpoint configuration."""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from . import config

logger = logging.getLogger(__name__)


@dataclass
class DriveConfiguration:
    """Settings for one endpoint: which API method to call and how to authenticate.

    ``arguments`` holds method-argument options (e.g. ``fileId``) that are
    passed on every call made through the endpoint.
    """

    api_name: Optional[str] = None
    method_name: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    application_name: Optional[str] = None
    scopes: Optional[List[str]] = None
    in_body: Optional[str] = None
    arguments: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_config(cls) -> "DriveConfiguration":
        """Build a configuration from the user's YAML config file."""
        settings = config.load_config()
        scopes = config.lookup(settings, "scopes")
        if isinstance(scopes, str):
            scopes = [s.strip() for s in scopes.split(",") if s.strip()]
        return cls(
            client_id=config.lookup(settings, "client.id"),
            client_secret=config.lookup(settings, "client.secret"),
            application_name=config.lookup(settings, "client.application_name"),
            access_token=config.lookup(settings, "token.access"),
            refresh_token=config.lookup(settings, "token.refresh"),
            scopes=scopes,
        )

    def copy(self, **overrides) -> "DriveConfiguration":
        """Return an independent copy, optionally overriding fields."""
        overrides.setdefault("arguments", dict(self.arguments))
        if self.scopes is not None:
            overrides.setdefault("scopes", list(self.scopes))
        return replace(self, **overrides)
