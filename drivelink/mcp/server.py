"""drivelink MCP Server - Exposes Drive API methods via MCP.

Every Drive API method reachable through a ``google-drive://`` URI can be
invoked with the ``drive_call`` tool. Credentials come from the drivelink
config file, just like the CLI.
"""

import json
import logging
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP

from drivelink.sdk import ApiName, DriveComponent
from drivelink.sdk.api_collection import describe_api
from drivelink.sdk.exceptions import DriveLinkError

logger = logging.getLogger(__name__)

# Create the MCP server
mcp = FastMCP("drivelink")

_component: Optional[DriveComponent] = None


def get_component() -> DriveComponent:
    """Get the component shared by all tool calls, creating it on first use."""
    global _component
    if _component is None:
        _component = DriveComponent()
    return _component


@mcp.tool()
async def drive_call(
    uri: str,
    arguments: Optional[dict[str, Any]] = None,
    body: Any = None,
) -> dict[str, Any]:
    """
    Invoke a Google Drive API method addressed by URI.

    Args:
        uri: Endpoint URI, 'google-drive://<api-name>/<method-name>?<options>'.
             Example: 'google-drive://drive-files/get?fileId=abc123'
        arguments: Optional. Method arguments, e.g. {"fileId": "abc123"}.
                   These override arguments given in the URI.
        body: Optional. Message body; used for the argument named by the
              URI's inBody option, e.g. '...drive-files/insert?inBody=content'.

    Returns:
        {"result": <API response>} or {"error": <message>}

    Examples:
        # File metadata
        drive_call("google-drive://drive-files/get", {"fileId": "abc123"})

        # Comments on a file
        drive_call("google-drive://drive-comments/list?fileId=abc123")
    """
    try:
        endpoint = get_component().create_endpoint(uri)
        prefix = endpoint.get_properties_helper().prefix
        headers = {prefix + name: value for name, value in (arguments or {}).items()}
        result = endpoint.create_producer().request(body=body, headers=headers)
        return {"result": result}
    except DriveLinkError as e:
        logger.error(f"Error calling {uri}: {e}")
        return {"error": str(e)}


@mcp.tool()
async def list_drive_apis() -> list[str]:
    """List the Drive API names usable in endpoint URIs."""
    return [name.value for name in ApiName]


@mcp.tool()
async def list_drive_methods(api_name: str) -> dict[str, Any]:
    """
    List the methods of a Drive API with their required and optional arguments.

    Args:
        api_name: One of the names from list_drive_apis, e.g. 'drive-files'
    """
    try:
        return describe_api(api_name)
    except DriveLinkError as e:
        return {"error": str(e)}


# =============================================================================
# Resources (read-only data access)
# =============================================================================

@mcp.resource("drivelink://apis")
async def apis_resource() -> str:
    """Every Drive API with its methods and arguments."""
    return json.dumps({name.value: describe_api(name) for name in ApiName}, indent=2)


# =============================================================================
# Server entry point
# =============================================================================

def run_server():
    """Run the MCP server with stdio transport."""
    mcp.run()


if __name__ == "__main__":
    run_server()
