"""Commands for authorizing drivelink against a Google account."""

import os
import json
import logging

import click

from drivelink.sdk import config
from drivelink.sdk.auth import DEFAULT_SCOPES, resolve_scopes

logger = logging.getLogger(__name__)


def _read_client_secrets(path: str) -> dict:
    """Read the 'installed' or 'web' section of an OAuth client secrets file."""
    with open(path) as f:
        data = json.load(f)
    for section in ("installed", "web"):
        if section in data:
            return data[section]
    raise ValueError("Invalid client secrets format: expected an 'installed' or 'web' section.")


def run_login_flow(client_secrets_path: str, scopes: list) -> dict:
    """
    Run the browser OAuth flow and return the values to store in config.

    Returns:
        Dict with client_id, client_secret, access_token and refresh_token
    """
    from google_auth_oauthlib.flow import InstalledAppFlow

    secrets = _read_client_secrets(client_secrets_path)
    flow = InstalledAppFlow.from_client_secrets_file(client_secrets_path, scopes)
    creds = flow.run_local_server(port=0)
    logger.info("User authorization completed via browser.")
    return {
        "client_id": secrets.get("client_id"),
        "client_secret": secrets.get("client_secret"),
        "access_token": creds.token,
        "refresh_token": creds.refresh_token,
    }


@click.group()
def auth():
    """Authorize drivelink to access Google Drive."""
    pass


@auth.command('login')
@click.argument('client_secrets', type=click.Path(exists=True, dir_okay=False))
@click.option('--scopes', default=None,
              help='Comma-separated scopes or aliases. Defaults to the Drive scopes drivelink needs.')
def login(client_secrets, scopes):
    """Authorize with an OAuth client secrets file and store the tokens in config.

    CLIENT_SECRETS: Path to the client_secrets.json downloaded from Google Cloud Console
    """
    requested = resolve_scopes([s.strip() for s in scopes.split(",")] if scopes else DEFAULT_SCOPES)
    click.echo("Initiating OAuth flow via browser...", err=True)
    try:
        values = run_login_flow(os.path.abspath(client_secrets), requested)
    except (ValueError, json.JSONDecodeError) as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)
    except Exception as e:
        click.secho(f"OAuth flow failed: {e}", fg="red", err=True)
        raise SystemExit(1)

    config_data = config.load_config()
    config_data["client"]["id"] = values["client_id"]
    config_data["client"]["secret"] = values["client_secret"]
    config_data["token"]["access"] = values["access_token"]
    config_data["token"]["refresh"] = values["refresh_token"]
    config_data["scopes"] = requested
    config.save_config(config_data)
    click.secho("✓ Authorization saved.", fg="green")
    if not values["refresh_token"]:
        click.secho("Warning: no refresh token was issued; calls will fail once the access token expires.",
                    fg="yellow")


@auth.command('status')
def status():
    """Show which credentials drivelink will use."""
    client_id = config.get_config_value("client.id")
    has_secret = bool(config.get_config_value("client.secret"))
    has_refresh = bool(config.get_config_value("token.refresh"))
    if client_id and has_secret:
        click.echo(f"OAuth client: {client_id}")
        click.echo(f"Refresh token: {'configured' if has_refresh else 'missing'}")
    else:
        click.echo("No OAuth client configured; Application Default Credentials will be used.")
    scopes = resolve_scopes(config.get_config_value("scopes"))
    click.echo("Scopes:")
    for scope in scopes:
        click.echo(f"  {scope}")
