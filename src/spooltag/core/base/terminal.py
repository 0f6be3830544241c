from __future__ import annotations

from typing import Callable

from spooltag.core.base.agent import Agent
from spooltag.core.base.message import Message, Result


def handles(message_cls: type[Message]) -> Callable:
    """Register a method as the handler for a message type."""

    def decorator(method: Callable) -> Callable:
        method._handles_message = message_cls
        return method

    return decorator


class Terminal:
    """Base terminal: dispatches messages to @handles methods.

    Handlers own the whole transaction, connection included; the caller
    only has to disconnect() afterwards, whatever the outcome.
    """

    _handlers: dict[type[Message], str]

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        cls._handlers = {}
        for base in reversed(cls.__mro__):
            if hasattr(base, "_handlers"):
                cls._handlers.update(base._handlers)
        for name in vars(cls):
            method = getattr(cls, name)
            if callable(method) and hasattr(method, "_handles_message"):
                cls._handlers[method._handles_message] = name

    def __init__(self, agent: Agent) -> None:
        self._agent = agent

    def disconnect(self) -> None:
        self._agent.disconnect()

    def send(self, message: Message) -> Result:
        """Dispatch a message to the registered handler."""
        handler_name = self._handlers.get(type(message))
        if handler_name is None:
            raise ValueError(f"unsupported message: {message}")
        return getattr(self, handler_name)(message)
