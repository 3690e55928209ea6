"""Polling consumer: invokes the endpoint's Drive method on a schedule."""

import logging
import threading
from typing import Any, Callable, List

from .exchange import Exchange
from .invoke import check_arguments, invoke_api_method

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 500
DEFAULT_INITIAL_DELAY_MS = 1000


class DriveConsumer:
    """
    Polls a Drive endpoint and hands results to a processor.

    Each poll invokes the endpoint's method with its configured arguments.
    With ``split_result`` (the default), list responses are split so that
    every item reaches the processor in its own exchange.
    """

    def __init__(self, endpoint, processor: Callable[[Exchange], Any]):
        self.endpoint = endpoint
        self.processor = processor
        self.delay = DEFAULT_DELAY_MS
        self.initial_delay = DEFAULT_INITIAL_DELAY_MS
        self.split_result = True

        self._args = endpoint.get_properties_helper().get_configuration_properties(endpoint.configuration)
        # consumers have no message to take arguments from
        check_arguments(endpoint, self._args)

        self._stop_event = threading.Event()
        self._thread = None

    def _split(self, result: Any) -> List[Any]:
        if not self.split_result:
            return [result]
        if isinstance(result, list):
            return result
        if isinstance(result, dict) and isinstance(result.get("items"), list):
            return result["items"]
        return [result]

    def poll(self) -> int:
        """
        Invoke the method once and process the result.

        Returns:
            Number of exchanges processed
        """
        result = invoke_api_method(self.endpoint, self._args)
        prefix = self.endpoint.get_properties_helper().prefix
        processed = 0
        for item in self._split(result):
            exchange = Exchange.of(body=item, headers={
                prefix + "apiName": self.endpoint.api_name.value,
                prefix + "methodName": self.endpoint.method_name,
            })
            self.processor(exchange)
            processed += 1
        logger.debug(f"Poll of {self.endpoint.uri} processed {processed} exchange(s)")
        return processed

    def _run(self, stop_event: threading.Event):
        if stop_event.wait(self.initial_delay / 1000.0):
            return
        while not stop_event.is_set():
            try:
                self.poll()
            except Exception as e:
                logger.error(f"Error polling {self.endpoint.uri}: {e}", exc_info=True)
            if stop_event.wait(self.delay / 1000.0):
                break

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        """Start polling on a background thread."""
        if self.is_running:
            return
        # each thread gets its own event so a thread that outlived stop() still exits
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run,
            args=(self._stop_event,),
            name=f"{self.endpoint.get_thread_profile_name()}-{self.endpoint.api_name.value}",
            daemon=True,
        )
        self._thread.start()
        logger.info(f"Started consumer for {self.endpoint.uri}")

    def stop(self, timeout: float = None):
        """Signal the polling thread to stop and wait for it."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            if self._thread.is_alive():
                logger.warning(f"Consumer for {self.endpoint.uri} still finishing its last poll")
            self._thread = None
            logger.info(f"Stopped consumer for {self.endpoint.uri}")
