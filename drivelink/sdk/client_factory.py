"""Pluggable factories for the Drive API client."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from googleapiclient.discovery import build

from .auth import get_credentials

logger = logging.getLogger(__name__)

DRIVE_API_VERSION = "v2"


class DriveClientFactory(ABC):
    """Creates Drive API client objects for endpoints."""

    @abstractmethod
    def make_client(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        scopes: Sequence[str],
        application_name: Optional[str] = None,
        refresh_token: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> Any:
        """
        Create a Drive client.

        Returns:
            An object exposing the Drive resources (files(), about(), ...)
        """
        pass


class DefaultDriveClientFactory(DriveClientFactory):
    """Builds a discovery-based Drive v2 client from google-api-python-client."""

    def make_client(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        scopes: Sequence[str],
        application_name: Optional[str] = None,
        refresh_token: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> Any:
        creds = get_credentials(
            client_id,
            client_secret,
            scopes,
            refresh_token=refresh_token,
            access_token=access_token,
        )
        if application_name:
            logger.debug(f"Building Drive client for application '{application_name}'")
        return build("drive", DRIVE_API_VERSION, credentials=creds, cache_discovery=False)
