"""drivelink - Google Drive connector.

Namespace package containing:
- drivelink.sdk: Endpoint/producer/consumer connector over the Drive API
- drivelink.cli: Command-line interface
- drivelink.mcp: Model Context Protocol server for LLM integration
"""

__version__ = "0.1.0"
