"""Interface of the remote-execution backend and its loader.

The backend owns connection setup, request serialization and the wire
transport. This tool only drives it through :class:`RemoteExecutor`.
"""

from __future__ import annotations

import importlib
from typing import Any, Callable, Protocol, runtime_checkable

from protocol.envelope import ExecutionOutcome, MetaMonOp, ServerLocation


class RemoteSetupError(RuntimeError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@runtime_checkable
class RemoteExecutor(Protocol):
    def configure(self, location: ServerLocation, config_file: str | None) -> None:
        """Prepare the session; raise :class:`RemoteSetupError` on failure."""
        ...

    def set_max_content_length(self, nbytes: int) -> None: ...

    def execute(self, location: ServerLocation, op: MetaMonOp) -> ExecutionOutcome: ...

    def decode_error(self, status: int) -> str: ...


ExecutorFactory = Callable[[], Any]


def load_executor_factory(target: str) -> ExecutorFactory:
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name.strip() or not attr.strip():
        raise RemoteSetupError(f"invalid backend `{target}`, expected `module:factory`")
    try:
        module = importlib.import_module(module_name.strip())
    except ImportError as exc:
        raise RemoteSetupError(f"cannot import backend module `{module_name}`: {exc}") from exc
    factory = getattr(module, attr.strip(), None)
    if not callable(factory):
        raise RemoteSetupError(f"backend `{target}` is not callable")
    return factory


def load_executor(target: str | None) -> RemoteExecutor:
    if target is None or target.strip() == "":
        raise RemoteSetupError("no remote backend configured")
    factory = load_executor_factory(target.strip())
    try:
        executor = factory()
    except Exception as exc:  # noqa: BLE001
        raise RemoteSetupError(f"backend `{target}` failed to start: {type(exc).__name__}: {exc}") from exc
    if not isinstance(executor, RemoteExecutor):
        raise RemoteSetupError(f"backend `{target}` does not provide the remote executor interface")
    return executor


def close_executor(executor: RemoteExecutor | None) -> None:
    if executor is None:
        return
    close_fn = getattr(executor, "close", None)
    if callable(close_fn):
        close_fn()
