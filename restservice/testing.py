# restservice/testing.py
"""
Helpers for driving a running restservice over real HTTP.

LiveServer starts uvicorn in a background thread on a free port and reports
the port it actually bound. Scenario holds the last response and offers the
given/when/then steps used by the acceptance tests:

    with LiveServer(create_app()) as server, Scenario(server.base_url) as s:
        s.get("/greeting")
        s.assert_status(200)
        s.assert_content("Hello, World!")
"""

import logging
import os
import threading
import time
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI

logger = logging.getLogger(__name__)

WILDCARD_HOSTS = {"0.0.0.0": "127.0.0.1", "::": "[::1]"}


class LiveServer:

    def __init__(self, app: FastAPI, host: str = "127.0.0.1", port: int = 0):
        self.host = host
        self.port: Optional[int] = None
        config = uvicorn.Config(app, host=host, port=port, log_level="warning")
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(target=self._server.run, daemon=True)

    @property
    def base_url(self) -> str:
        """
        Address a client on this machine can reach. Wildcard binds map to
        the matching loopback address.
        """
        if self.port is None:
            raise RuntimeError("server has not been started")
        host = WILDCARD_HOSTS.get(self.host, self.host)
        return f"http://{host}:{self.port}"

    def start(self, timeout: float = 10.0) -> "LiveServer":
        self._thread.start()
        deadline = time.monotonic() + timeout
        while not self._server.started:
            if not self._thread.is_alive():
                raise RuntimeError("server exited during startup")
            if time.monotonic() > deadline:
                self.stop()
                raise RuntimeError(f"server did not start within {timeout}s")
            time.sleep(0.01)

        # with port=0 only the bound socket knows the real port
        sock = self._server.servers[0].sockets[0]
        self.port = sock.getsockname()[1]
        logger.info("Server is running on port: %d", self.port)
        logger.info("Server process ID: %d", os.getpid())
        return self

    def stop(self, timeout: float = 10.0) -> None:
        self._server.should_exit = True
        if self._thread.is_alive():
            self._thread.join(timeout)
        if self._thread.is_alive():
            logger.warning(
                "Server on port %s did not stop within %ss; port may still be in use",
                self.port,
                timeout,
            )

    def __enter__(self):
        return self.start()

    def __exit__(self, *exc_info):
        self.stop()


class Scenario:

    def __init__(self, base_url: str, timeout: float = 5.0):
        self._client = httpx.Client(base_url=base_url, timeout=timeout)
        self.response: Optional[httpx.Response] = None

    # --- When ---

    def get(self, path: str) -> httpx.Response:
        return self._send(path)

    def get_with_param(self, path: str, name: str, value: str) -> httpx.Response:
        return self._send(path, params={name: value})

    def _send(self, path: str, params: Optional[dict] = None) -> httpx.Response:
        self.response = self._client.get(path, params=params)
        logger.info(
            "GET %s -> %d %s",
            self.response.request.url,
            self.response.status_code,
            self.response.text,
        )
        return self.response

    # --- Then ---

    def assert_status(self, expected: int) -> None:
        actual = self._last_response().status_code
        if actual != expected:
            raise AssertionError(f"expected status {expected}, got {actual}")

    def assert_content(self, expected: str) -> None:
        response = self._last_response()
        logger.info("Actual response content: %s", response.text)
        try:
            body = response.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            raise AssertionError(
                f"expected content {expected!r}, got body {response.text!r}"
            )
        actual = body.get("content")
        if actual != expected:
            raise AssertionError(f"expected content {expected!r}, got {actual!r}")

    def _last_response(self) -> httpx.Response:
        if self.response is None:
            raise AssertionError("no request has been sent yet")
        return self.response

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
