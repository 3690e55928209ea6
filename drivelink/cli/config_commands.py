"""Commands for viewing and editing the drivelink config file."""

import click
import yaml

from drivelink.sdk import config

# Define the schema of allowed configuration keys
ALLOWED_CONFIG = {
    "client.id": {"type": str, "secret": False},
    "client.secret": {"type": str, "secret": True},
    "client.application_name": {"type": str, "secret": False},
    "token.access": {"type": str, "secret": True},
    "token.refresh": {"type": str, "secret": True},
    "scopes": {"type": str, "secret": False},
}


def _mask_secrets(config_data: dict) -> dict:
    masked = {}
    for key, value in config_data.items():
        if isinstance(value, dict):
            masked[key] = {
                k: ("********" if v and ALLOWED_CONFIG.get(f"{key}.{k}", {}).get("secret") else v)
                for k, v in value.items()
            }
        else:
            masked[key] = value
    return masked


@click.group()
def config_group():
    """Commands for managing drivelink configuration."""
    pass


@config_group.command('view')
@click.option('--show-secrets', is_flag=True, help='Show client secret and tokens unmasked.')
def view_config(show_secrets):
    """Displays the current drivelink configuration."""
    config_data = config.load_config()
    if not show_secrets:
        config_data = _mask_secrets(config_data)
    click.echo(yaml.dump(config_data, default_flow_style=False))


@config_group.command('set')
@click.argument('key')
@click.argument('value')
def set_config(key, value):
    """
    Sets a configuration value for a supported key.

    \b
    Supported Keys:
      - client.id, client.secret: OAuth client credentials
      - client.application_name: Application name for the Drive client
      - token.access, token.refresh: OAuth tokens
      - scopes: Comma-separated scopes or aliases (drive, drive-file, ...)

    \b
    Examples:
      drivelink config set client.id 1234.apps.googleusercontent.com
      drivelink config set scopes drive,drive-file
    """
    if key not in ALLOWED_CONFIG:
        allowed = ", ".join(sorted(ALLOWED_CONFIG))
        raise click.UsageError(f"Configuration key '{key}' is not supported. Supported keys: {allowed}.")

    if key == "scopes":
        value = [s.strip() for s in value.split(",") if s.strip()]

    config.set_config_value(key, value)
    shown = "********" if ALLOWED_CONFIG[key]["secret"] else value
    click.echo(f"✓ Set '{key}' to: {shown}")
