"""
AvatarAPI - Worker Supervisor
=============================

Runs the API in several worker processes that share one listening
socket. A worker that exits on its own is replaced; workers hold no
request state, so nothing is handed over.
"""

import multiprocessing
import os
import signal
import socket
import threading
from multiprocessing.process import BaseProcess
from typing import Any, List, Optional

import uvicorn

from src.core import log
from src.api.config import APIConfig


APP_FACTORY = "src.api.app:create_app"
"""Import string uvicorn uses to build the app inside each worker."""

SHUTDOWN_TIMEOUT = 5.0
CHECK_INTERVAL = 0.5


def _uvicorn_config(config: APIConfig) -> uvicorn.Config:
    return uvicorn.Config(
        app=APP_FACTORY,
        factory=True,
        host=config.host,
        port=config.port,
        log_level="warning",
        access_log=False,
    )


def serve_worker(config: APIConfig, sock: Optional[socket.socket] = None) -> None:
    """Serve the app in the current process (on a shared socket if given)."""
    server = uvicorn.Server(_uvicorn_config(config))
    log.tree("Worker Started", [
        ("PID", str(os.getpid())),
        ("Host", config.host),
        ("Port", str(config.port)),
    ], emoji="🚀")
    server.run(sockets=[sock] if sock else None)


class WorkerSupervisor:
    """Forks and babysits a fixed number of API workers."""

    def __init__(self, config: APIConfig) -> None:
        self._config = config
        self._context = multiprocessing.get_context("spawn")
        self._workers: List[BaseProcess] = []
        self._socket: Optional[socket.socket] = None
        self._should_exit = threading.Event()

    @property
    def workers(self) -> List[BaseProcess]:
        return list(self._workers)

    def _spawn(self) -> BaseProcess:
        process = self._context.Process(
            target=serve_worker,
            kwargs={"config": self._config, "sock": self._socket},
        )
        process.start()
        return process

    def _handle_signal(self, signum: int, frame: Any) -> None:
        self._should_exit.set()

    def check_workers(self) -> int:
        """Replace any worker that has exited. Returns how many were replaced."""
        replaced = 0
        for index, process in enumerate(self._workers):
            if process.is_alive() or self._should_exit.is_set():
                continue

            log.warning("Worker Died", [
                ("PID", str(process.pid)),
                ("Exit Code", str(process.exitcode)),
                ("Action", "Forking replacement"),
            ])
            process.close()
            self._workers[index] = self._spawn()
            replaced += 1
        return replaced

    def startup(self) -> None:
        for signum in (signal.SIGINT, signal.SIGTERM):
            signal.signal(signum, self._handle_signal)

        self._socket = _uvicorn_config(self._config).bind_socket()
        self._workers = [self._spawn() for _ in range(self._config.workers)]

        log.tree("Supervisor Started", [
            ("PID", str(os.getpid())),
            ("Workers", str(len(self._workers))),
            ("Listening", f"http://{self._config.host}:{self._config.port}"),
        ], emoji="🌐")

    def shutdown(self) -> None:
        log.tree("Supervisor Stopping", [
            ("Workers", str(len(self._workers))),
        ], emoji="🛑")

        for process in self._workers:
            if process.is_alive():
                process.terminate()
        for process in self._workers:
            process.join(SHUTDOWN_TIMEOUT)
            if process.is_alive():
                process.kill()
                process.join()

        if self._socket is not None:
            self._socket.close()
            self._socket = None

        log.tree("Supervisor Stopped", [], emoji="✅")

    def run(self) -> None:
        self.startup()
        try:
            while not self._should_exit.wait(CHECK_INTERVAL):
                self.check_workers()
        finally:
            self.shutdown()


__all__ = ["WorkerSupervisor", "serve_worker"]
