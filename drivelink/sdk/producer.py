"""Producer: invokes the endpoint's Drive method for each exchange."""

import logging
from typing import Any, Dict

from .exchange import Exchange
from .invoke import invoke_api_method

logger = logging.getLogger(__name__)


class DriveProducer:
    """Sends exchanges to a Drive endpoint; the API response becomes the message body."""

    def __init__(self, endpoint):
        self.endpoint = endpoint

    def get_method_arguments(self, exchange: Exchange) -> Dict[str, Any]:
        """Collect the method arguments from the endpoint, headers and body."""
        helper = self.endpoint.get_properties_helper()
        args = helper.get_configuration_properties(self.endpoint.configuration)
        args = helper.get_exchange_properties(exchange, args)
        if self.endpoint.in_body:
            args[helper.translate_name(self.endpoint.in_body)] = exchange.in_message.body
        return args

    def process(self, exchange: Exchange) -> Exchange:
        """
        Invoke the endpoint's method for an exchange.

        Raises:
            MissingArgumentError: If a required argument is missing
            ApiInvocationError: If the Drive API returns an error
        """
        args = self.get_method_arguments(exchange)
        result = invoke_api_method(self.endpoint, args)

        prefix = self.endpoint.get_properties_helper().prefix
        message = exchange.in_message
        message.body = result
        message.set_header(prefix + "apiName", self.endpoint.api_name.value)
        message.set_header(prefix + "methodName", self.endpoint.method_name)
        return exchange

    def request(self, body: Any = None, headers: Dict[str, Any] = None) -> Any:
        """Convenience wrapper: process a new exchange and return the result body."""
        return self.process(Exchange.of(body=body, headers=headers)).in_message.body
