"""Translation between connector property names and Drive method arguments."""

import re
import logging
from typing import Any, Dict, Mapping

logger = logging.getLogger(__name__)

# Message headers carrying method arguments start with this prefix
PROPERTY_PREFIX = "DriveLink."

# Name used for consumer threads
THREAD_PROFILE_NAME = "DriveLink"

# Connector-level names for arguments the client spells differently
ARGUMENT_ALIASES = {
    "content": "body",
    "mediaContent": "media_body",
    "mediaMimeType": "media_mime_type",
}

# Arguments the discovery client itself spells in snake_case
SNAKE_CASE_ARGUMENTS = {"media_body", "media_mime_type"}

_SNAKE_PART = re.compile(r"_([a-z0-9])")


class PropertiesHelper:
    """Maps option names and prefixed message headers onto method arguments."""

    def __init__(self, prefix: str = PROPERTY_PREFIX):
        self.prefix = prefix

    def translate_name(self, name: str) -> str:
        """
        Translate an option name to the client's argument name.

        'content' -> 'body', 'file_id' -> 'fileId', 'media_body' unchanged.
        """
        if name in ARGUMENT_ALIASES:
            return ARGUMENT_ALIASES[name]
        if name in SNAKE_CASE_ARGUMENTS or "_" not in name:
            return name
        camel = _SNAKE_PART.sub(lambda m: m.group(1).upper(), name)
        return ARGUMENT_ALIASES.get(camel, camel)

    def get_configuration_properties(self, configuration) -> Dict[str, Any]:
        """Method arguments configured on the endpoint, skipping empty values."""
        return {
            self.translate_name(name): value
            for name, value in configuration.arguments.items()
            if value is not None
        }

    def get_exchange_properties(self, exchange, properties: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Merge the prefixed headers of an exchange's message over ``properties``.

        Args:
            exchange: The exchange being processed
            properties: Arguments already collected (e.g. from the endpoint)

        Returns:
            A new dict; header values win over ``properties``.
        """
        merged = dict(properties)
        found = 0
        for name, value in exchange.in_message.headers.items():
            if name.startswith(self.prefix):
                merged[self.translate_name(name[len(self.prefix):])] = value
                found += 1
        if found:
            logger.debug(f"Found {found} argument header(s) on exchange")
        return merged


_HELPER = PropertiesHelper()


def get_helper() -> PropertiesHelper:
    return _HELPER
