"""Drive component: creates endpoints from ``google-drive://`` URIs."""

import logging
from typing import Any, Dict, Optional
from urllib.parse import parse_qsl, urlsplit

from .client_factory import DriveClientFactory
from .configuration import DriveConfiguration
from .endpoint import DriveEndpoint
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SCHEME = "google-drive"


def coerce_value(value: Any) -> Any:
    """Basic type conversion for option values given as strings."""
    if not isinstance(value, str):
        return value
    if value.lower() in ['true', 'false']:
        return value.lower() == 'true'
    # "0042" stays a string; ids and keys may carry leading zeros
    if value.isdecimal() and str(int(value)) == value:
        return int(value)
    return value


def parse_uri(uri: str):
    """
    Split an endpoint URI into API name, method name and options.

    Example:
        google-drive://drive-files/get?fileId=abc
        -> ('drive-files', 'get', {'fileId': 'abc'})

    Raises:
        ConfigurationError: If the URI is not a google-drive URI or lacks a part
    """
    parts = urlsplit(uri)
    if parts.scheme != SCHEME:
        raise ConfigurationError(f"Unsupported URI scheme '{parts.scheme}' in {uri}, expected '{SCHEME}'")

    api_name = parts.netloc
    method_name = parts.path.strip("/")
    if not api_name or not method_name or "/" in method_name:
        raise ConfigurationError(f"Invalid endpoint URI {uri}, expected {SCHEME}://<api-name>/<method-name>")

    options = {name: coerce_value(value) for name, value in parse_qsl(parts.query, keep_blank_values=True)}
    return api_name, method_name, options


class DriveComponent:
    """
    Entry point for creating Drive endpoints.

    The component holds default configuration (by default read from the
    user's config file) that every endpoint starts from, and optionally a
    client factory shared by its endpoints.

    Usage:
        component = DriveComponent()
        endpoint = component.create_endpoint("google-drive://drive-files/list?q=trashed=false")
        files = endpoint.create_producer().request()
    """

    def __init__(
        self,
        configuration: Optional[DriveConfiguration] = None,
        client_factory: Optional[DriveClientFactory] = None,
    ):
        self._configuration = configuration
        self.client_factory = client_factory

    @property
    def configuration(self) -> DriveConfiguration:
        if self._configuration is None:
            self._configuration = DriveConfiguration.from_config()
        return self._configuration

    @configuration.setter
    def configuration(self, configuration: DriveConfiguration):
        self._configuration = configuration

    def create_endpoint(self, uri: str, **options) -> DriveEndpoint:
        """
        Create an endpoint for a URI.

        Args:
            uri: e.g. 'google-drive://drive-files/get?fileId=abc'
            **options: Extra options, applied after the URI's query options

        Raises:
            ConfigurationError: If the URI, API name, method or an option is invalid
        """
        api_name, method_name, uri_options = parse_uri(uri)
        merged: Dict[str, Any] = dict(uri_options)
        merged.update({name: coerce_value(value) for name, value in options.items()})

        endpoint = DriveEndpoint(uri, self, api_name, method_name, self.configuration.copy())
        endpoint.configure_properties(merged)
        logger.debug(f"Created endpoint {uri}")
        return endpoint
