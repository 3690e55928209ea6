"""OAuth scopes and credential construction for the Drive client."""

import logging
from typing import Any, List, Optional, Sequence

logger = logging.getLogger(__name__)

TOKEN_URI = "https://oauth2.googleapis.com/token"

DRIVE = "https://www.googleapis.com/auth/drive"
DRIVE_FILE = "https://www.googleapis.com/auth/drive.file"
DRIVE_APPS_READONLY = "https://www.googleapis.com/auth/drive.apps.readonly"
DRIVE_METADATA_READONLY = "https://www.googleapis.com/auth/drive.metadata.readonly"

DEFAULT_SCOPES = [DRIVE_FILE, DRIVE_APPS_READONLY, DRIVE_METADATA_READONLY, DRIVE]

# Scope aliases for convenience
SCOPE_ALIASES = {
    "drive": DRIVE,
    "drive-file": DRIVE_FILE,
    "drive-apps-read": DRIVE_APPS_READONLY,
    "drive-metadata-read": DRIVE_METADATA_READONLY,
    "drive-read": "https://www.googleapis.com/auth/drive.readonly",
}


def resolve_scope_alias(alias: str) -> str:
    """Resolve a scope alias to its full URL, or return the input if not an alias."""
    return SCOPE_ALIASES.get(alias, alias)


def resolve_scopes(scopes: Optional[Sequence[str]]) -> List[str]:
    """Resolve aliases in a scope list, falling back to DEFAULT_SCOPES when empty."""
    if not scopes:
        return list(DEFAULT_SCOPES)
    return [resolve_scope_alias(s) for s in scopes]


def get_credentials(
    client_id: Optional[str],
    client_secret: Optional[str],
    scopes: Sequence[str],
    refresh_token: Optional[str] = None,
    access_token: Optional[str] = None,
) -> Any:
    """
    Build credentials for the Drive client.

    With a client id and secret, OAuth user credentials are built from the
    configured tokens; google-auth refreshes the access token as needed.
    Without them, Application Default Credentials are used.

    Raises:
        google.auth.exceptions.DefaultCredentialsError: If ADC is needed but not available
    """
    if client_id and client_secret:
        from google.oauth2.credentials import Credentials

        logger.debug(f"Using OAuth client credentials for client {client_id}")
        return Credentials(
            token=access_token,
            refresh_token=refresh_token,
            token_uri=TOKEN_URI,
            client_id=client_id,
            client_secret=client_secret,
            scopes=list(scopes),
        )

    import google.auth

    creds, project = google.auth.default(scopes=list(scopes))
    source = "Application Default Credentials"
    if project:
        source += f" (project: {project})"
    logger.debug(f"Using {source}")
    return creds
