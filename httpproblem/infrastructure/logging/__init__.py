"""Logging adapters implementing LoggerProtocol."""

from httpproblem.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
