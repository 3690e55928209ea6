"""Drive endpoints: one API method of one Drive resource, addressable by URI."""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from . import api_collection
from . import properties_helper
from .api_name import ApiName
from .auth import resolve_scopes
from .client_factory import DefaultDriveClientFactory, DriveClientFactory
from .configuration import DriveConfiguration
from .consumer import DriveConsumer
from .exceptions import InvalidApiNameError, UnsupportedOptionError
from .producer import DriveProducer

logger = logging.getLogger(__name__)

# Endpoint option name -> DriveConfiguration field
CONFIGURATION_OPTIONS = {
    "clientId": "client_id",
    "clientSecret": "client_secret",
    "accessToken": "access_token",
    "refreshToken": "refresh_token",
    "applicationName": "application_name",
    "scopes": "scopes",
    "inBody": "in_body",
}

CONSUMER_PREFIX = "consumer."

# consumer.<option> -> DriveConsumer attribute
CONSUMER_OPTIONS = {
    "delay": "delay",
    "initialDelay": "initial_delay",
    "splitResult": "split_result",
}

# ApiName -> client sub-resource accessor
API_RESOURCES = {
    ApiName.DRIVE_FILES: lambda client: client.files(),
    ApiName.DRIVE_ABOUT: lambda client: client.about(),
    ApiName.DRIVE_APPS: lambda client: client.apps(),
    ApiName.DRIVE_CHANGES: lambda client: client.changes(),
    ApiName.DRIVE_COMMENTS: lambda client: client.comments(),
    ApiName.DRIVE_PERMISSIONS: lambda client: client.permissions(),
    ApiName.DRIVE_PROPERTIES: lambda client: client.properties(),
    ApiName.DRIVE_REPLIES: lambda client: client.replies(),
    ApiName.DRIVE_REVISIONS: lambda client: client.revisions(),
}


class DriveEndpoint:
    """
    A Google Drive endpoint, e.g. ``google-drive://drive-files/get?fileId=...``.

    The endpoint owns the Drive client (created lazily through its client
    factory) and the resource object its method is invoked on.
    """

    def __init__(
        self,
        uri: str,
        component,
        api_name,
        method_name: str,
        configuration: DriveConfiguration,
    ):
        self.uri = uri
        self.component = component
        self.api_name = ApiName.from_value(api_name)
        self.method_name = method_name
        self.configuration = configuration
        self.configuration.api_name = self.api_name.value
        self.configuration.method_name = method_name
        self.method_helper = api_collection.get_helper(self.api_name)
        self.api_method = self.method_helper.get_method(method_name)
        self.consumer_options: Dict[str, Any] = {}

        self._api_proxy = None
        self._client = None
        self._client_factory: Optional[DriveClientFactory] = None

    def __repr__(self) -> str:
        return f"DriveEndpoint({self.uri!r})"

    @property
    def in_body(self) -> Optional[str]:
        return self.configuration.in_body

    def configure_properties(self, options: Mapping[str, Any]):
        """
        Apply endpoint options.

        Connector options go to the configuration, ``consumer.*`` options are
        kept for consumers, and everything else must be an argument of the
        endpoint's method.

        Raises:
            UnsupportedOptionError: If an option is none of the above
        """
        helper = self.get_properties_helper()
        unsupported = []
        for name, value in options.items():
            if name.startswith(CONSUMER_PREFIX):
                self.consumer_options[name[len(CONSUMER_PREFIX):]] = value
                continue

            field_name = CONFIGURATION_OPTIONS.get(name)
            if field_name is None and name in CONFIGURATION_OPTIONS.values():
                field_name = name
            if field_name is not None:
                if field_name == "scopes" and isinstance(value, str):
                    value = [s.strip() for s in value.split(",") if s.strip()]
                setattr(self.configuration, field_name, value)
                continue

            argument = helper.translate_name(name)
            if self.api_method.accepts(argument):
                self.configuration.arguments[argument] = value
            else:
                unsupported.append(name)

        if self.in_body and not self.api_method.accepts(helper.translate_name(self.in_body)):
            unsupported.append(f"inBody={self.in_body}")

        if unsupported:
            raise UnsupportedOptionError(
                f"There are {len(unsupported)} parameters that couldn't be set on the endpoint "
                f"{self.uri}: {', '.join(unsupported)}. Valid arguments for "
                f"{self.method_name}: {', '.join(self.api_method.arguments)}"
            )

    def create_producer(self) -> DriveProducer:
        return DriveProducer(self)

    def create_consumer(self, processor: Callable, **consumer_options) -> DriveConsumer:
        """
        Build a polling consumer for this endpoint.

        Keyword options (delay, initialDelay, splitResult) override the
        endpoint's ``consumer.*`` options.
        """
        # make sure inBody is not set for consumers
        if self.in_body is not None:
            raise UnsupportedOptionError("Option inBody is not supported for consumer endpoint")
        consumer = DriveConsumer(self, processor)
        self.configure_consumer(consumer, {**self.consumer_options, **consumer_options})
        return consumer

    def configure_consumer(self, consumer: DriveConsumer, options: Optional[Dict[str, Any]] = None):
        """Apply ``consumer.*`` options to a consumer."""
        if options is None:
            options = self.consumer_options
        for name, value in options.items():
            attribute = CONSUMER_OPTIONS.get(name)
            if attribute is None:
                raise UnsupportedOptionError(
                    f"Unknown consumer option '{CONSUMER_PREFIX}{name}'. "
                    f"Valid options: {', '.join(CONSUMER_PREFIX + o for o in CONSUMER_OPTIONS)}"
                )
            setattr(consumer, attribute, value)

    def get_properties_helper(self) -> properties_helper.PropertiesHelper:
        return properties_helper.get_helper()

    def get_thread_profile_name(self) -> str:
        return properties_helper.THREAD_PROFILE_NAME

    def after_configure_properties(self):
        """Resolve the client resource this endpoint's API name addresses."""
        accessor = API_RESOURCES.get(self.api_name)
        if accessor is None:
            raise InvalidApiNameError(f"Invalid API name {self.api_name}")
        self._api_proxy = accessor(self.get_client())

    def get_client(self):
        if self._client is None:
            cfg = self.configuration
            logger.debug(f"Creating Drive client for endpoint {self.uri}")
            self._client = self.client_factory.make_client(
                cfg.client_id,
                cfg.client_secret,
                resolve_scopes(cfg.scopes),
                application_name=cfg.application_name,
                refresh_token=cfg.refresh_token,
                access_token=cfg.access_token,
            )
        return self._client

    def get_api_proxy(self, method=None, args: Mapping[str, Any] = None):
        """Get the resource object that methods are invoked on."""
        if self._api_proxy is None:
            self.after_configure_properties()
        return self._api_proxy

    @property
    def client_factory(self) -> DriveClientFactory:
        if self._client_factory is None:
            component_factory = getattr(self.component, "client_factory", None)
            self._client_factory = component_factory or DefaultDriveClientFactory()
        return self._client_factory

    @client_factory.setter
    def client_factory(self, factory: DriveClientFactory):
        self._client_factory = factory
