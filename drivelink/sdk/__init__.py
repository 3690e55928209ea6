"""drivelink SDK - Google Drive API connector.

Exposes the Drive v2 resources (files, permissions, revisions, comments,
replies, changes, properties, apps, about) as endpoints addressed by URI.
Producers invoke an endpoint's method per exchange; consumers poll it.

Example usage:
    from drivelink.sdk import DriveComponent

    component = DriveComponent()
    endpoint = component.create_endpoint("google-drive://drive-files/get?fileId=abc")
    metadata = endpoint.create_producer().request()

    # Method arguments can also come from prefixed headers
    files = component.create_endpoint("google-drive://drive-files/list")
    result = files.create_producer().request(headers={"DriveLink.q": "trashed = false"})
"""

from . import config
from . import auth
from .api_name import ApiName
from .api_collection import ApiMethod, ApiMethodHelper, get_helper
from .client_factory import DriveClientFactory, DefaultDriveClientFactory
from .component import DriveComponent
from .configuration import DriveConfiguration
from .consumer import DriveConsumer
from .endpoint import DriveEndpoint
from .exchange import Exchange, Message
from .producer import DriveProducer

__all__ = [
    "config",
    "auth",
    "ApiName",
    "ApiMethod",
    "ApiMethodHelper",
    "get_helper",
    "DriveClientFactory",
    "DefaultDriveClientFactory",
    "DriveComponent",
    "DriveConfiguration",
    "DriveConsumer",
    "DriveEndpoint",
    "Exchange",
    "Message",
    "DriveProducer",
]
