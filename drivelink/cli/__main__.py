"""drivelink CLI - Command-line interface for the Google Drive connector."""

import logging
import os
import sys
import json
import time
from dotenv import load_dotenv
import click

from drivelink import __version__
from drivelink.sdk import DriveComponent, ApiName
from drivelink.sdk.api_collection import describe_api
from drivelink.sdk.component import coerce_value

from .config_commands import config_group as config_module
from .auth_commands import auth as auth_module


# Configure logging at the application level
if not logging.root.handlers:
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=getattr(logging, LOG_LEVEL),
                        format='%(asctime)s - %(levelname)s - %(message)s')
# Suppress noisy INFO logs from googleapiclient and google_auth_oauthlib
logging.getLogger('googleapiclient.discovery').setLevel(logging.WARNING)
logging.getLogger('googleapiclient.discovery_cache').setLevel(logging.WARNING)
logging.getLogger('google_auth_oauthlib.flow').setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def make_component() -> DriveComponent:
    """Create the component used by CLI commands (configuration from the config file)."""
    return DriveComponent()


def _parse_headers(headers) -> dict:
    parsed = {}
    for header in headers:
        if "=" not in header:
            raise click.BadParameter(f"Expected NAME=VALUE, got '{header}'", param_hint="--header")
        name, value = header.split("=", 1)
        parsed[name] = coerce_value(value)
    return parsed


def _parse_body(body):
    if body is None:
        return None
    try:
        return json.loads(body)
    except json.JSONDecodeError:
        return body


@click.group()
@click.version_option(__version__, prog_name="drivelink")
def drivelink():
    """drivelink - Google Drive API connector.

    Invoke Drive API methods addressed by URIs such as
    google-drive://drive-files/get?fileId=<id>
    """
    pass


@click.command()
@click.argument('uri')
@click.option('--header', '-H', 'headers', multiple=True,
              help="Method argument as NAME=VALUE. May be repeated. "
                   "Names may carry the 'DriveLink.' prefix.")
@click.option('--body', default=None,
              help="Message body (JSON if it parses). Used with the endpoint's inBody option.")
def call(uri, headers, body):
    """Invoke the Drive method addressed by URI. Output is in JSON format."""
    try:
        component = make_component()
        endpoint = component.create_endpoint(uri)
        helper = endpoint.get_properties_helper()
        message_headers = {
            name if name.startswith(helper.prefix) else helper.prefix + name: value
            for name, value in _parse_headers(headers).items()
        }
        logger.debug(f"Calling {uri} with headers {sorted(message_headers)}")
        result = endpoint.create_producer().request(body=_parse_body(body), headers=message_headers)
        click.echo(json.dumps(result, indent=2))
    except click.BadParameter:
        raise
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@click.command()
@click.argument('uri')
@click.option('--count', type=int, default=1, help='Number of polls to run (default 1).')
def poll(uri, count):
    """Poll the Drive method addressed by URI, printing each item as JSON."""
    try:
        component = make_component()
        endpoint = component.create_endpoint(uri)
        consumer = endpoint.create_consumer(
            lambda exchange: click.echo(json.dumps(exchange.body, indent=2))
        )
        for i in range(count):
            if i:
                time.sleep(consumer.delay / 1000.0)
            processed = consumer.poll()
            logger.info(f"Poll {i + 1}/{count}: {processed} item(s)")
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@click.command()
@click.argument('api_name', required=False)
def methods(api_name):
    """List Drive APIs, or the methods and arguments of API_NAME."""
    if not api_name:
        for name in ApiName:
            click.echo(name.value)
        return
    try:
        description = describe_api(api_name)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    click.echo(json.dumps(description, indent=2))


drivelink.add_command(call)
drivelink.add_command(poll)
drivelink.add_command(methods)
drivelink.add_command(config_module, name='config')
drivelink.add_command(auth_module, name='auth')


def main():
    """Entry point for the CLI."""
    load_dotenv()
    drivelink()


if __name__ == "__main__":
    main()
