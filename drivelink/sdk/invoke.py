"""Invocation of Drive API methods on an endpoint's resource object."""

import logging
from typing import Any, Mapping

from googleapiclient.errors import HttpError

from .exceptions import ApiInvocationError, MissingArgumentError
from .timing import time_api_call

logger = logging.getLogger(__name__)


def check_arguments(endpoint, args: Mapping[str, Any]):
    """
    Raises:
        MissingArgumentError: If a required argument of the endpoint's method has no value
    """
    missing = endpoint.method_helper.missing_arguments(endpoint.method_name, args)
    if missing:
        raise MissingArgumentError(
            f"Missing properties for {endpoint.api_name.value}/{endpoint.method_name}, "
            f"need one or more from {missing}"
        )


@time_api_call
def invoke_api_method(endpoint, args: Mapping[str, Any]) -> Any:
    """
    Call the endpoint's method with ``args`` and execute the request.

    Arguments the method does not accept are dropped.

    Returns:
        The decoded API response

    Raises:
        MissingArgumentError: If a required argument is missing
        ApiInvocationError: If the Drive API returns an error
    """
    check_arguments(endpoint, args)
    call_args = endpoint.method_helper.filter_arguments(endpoint.method_name, args)
    proxy = endpoint.get_api_proxy(endpoint.api_method, call_args)

    logger.debug(f"Invoking {endpoint.api_name.value}/{endpoint.method_name} with {sorted(call_args)}")
    try:
        return getattr(proxy, endpoint.method_name)(**call_args).execute()
    except HttpError as e:
        status = getattr(e.resp, "status", None)
        logger.error(f"Drive API error invoking {endpoint.api_name.value}/{endpoint.method_name}: {e}")
        raise ApiInvocationError(
            f"Error invoking {endpoint.method_name} on {endpoint.api_name.value}: {e}",
            status=int(status) if status is not None else None,
        ) from e
