"""
Command registration system with decorator support.

Commands register themselves by keyword through @register_command; the
registry imports every module of toyrobot.commands on first use so the
decorators run without a hand-maintained factory table.
"""

from __future__ import annotations

import logging
import pkgutil
import sys
from collections.abc import Callable
from importlib import import_module
from types import ModuleType

from toyrobot.commands.base import CommandBase
from toyrobot.config import TRACE

logger = logging.getLogger(__name__)

COMMANDS_PACKAGE = "toyrobot.commands"


class CommandRegistry:
    """
    Singleton registry for command classes, keyed by upper-case keyword.
    """

    _instance: CommandRegistry | None = None
    _commands: dict[str, type[CommandBase]] = {}
    _discovered: bool = False

    def __new__(cls) -> CommandRegistry:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the registry (only runs once due to singleton)."""
        if not hasattr(self, "_initialized"):
            self._commands = {}
            self._discovered = False
            self._initialized = True

    def register(self, name: str, command_class: type[CommandBase]) -> None:
        """
        Register a command class with the given keyword.

        Raises:
            ValueError: If a different class already owns the keyword
        """
        name = name.upper()
        if name in self._commands:
            existing = self._commands[name]
            if existing != command_class:
                raise ValueError(
                    f"Command '{name}' is already registered with class {existing.__name__}. "
                    f"Cannot register with {command_class.__name__}"
                )
        else:
            self._commands[name] = command_class
            logger.debug("Registered command '%s' -> %s", name, command_class.__name__)

    def get_command_class(self, name: str) -> type[CommandBase] | None:
        """Look up the command class for a keyword, case-insensitively."""
        if not self._discovered:
            self.discover_commands()
        return self._commands.get(name.upper())

    def _register_module_commands(self, module: ModuleType) -> None:
        """Re-register the decorated classes of an already imported module."""
        for obj in vars(module).values():
            if (
                isinstance(obj, type)
                and issubclass(obj, CommandBase)
                and obj.__module__ == module.__name__
                and "_registered_name" in vars(obj)
            ):
                self.register(obj._registered_name, obj)

    def discover_commands(self) -> None:
        """
        Import every module in the toyrobot.commands package to trigger the
        @register_command decorators.

        Modules imported before a clear() do not run their decorators again,
        so their classes are registered from the module namespace instead.
        """
        if self._discovered:
            return

        logger.debug("Discovering commands...")
        commands_package = import_module(COMMANDS_PACKAGE)

        for _importer, modname, ispkg in pkgutil.iter_modules(commands_package.__path__):
            if ispkg or modname == "base":
                continue
            full_module_name = f"{COMMANDS_PACKAGE}.{modname}"
            module = sys.modules.get(full_module_name)
            if module is None:
                import_module(full_module_name)
            else:
                self._register_module_commands(module)
            logger.log(TRACE, "Loaded command module: %s", full_module_name)

        self._discovered = True
        logger.debug("Command discovery complete. %d commands registered.", len(self._commands))

    def create_command_from_parts(
        self, parts: list[str]
    ) -> tuple[CommandBase | None, str | None]:
        """
        Create a command instance from a tokenized line.

        Returns:
            A tuple of (command, error_message):
            - (command, None) if the line is acceptable
            - (None, None) if the keyword is not registered
            - (None, error_message) if the keyword is known but its arguments are not
        """
        if not parts:
            logger.debug("Empty message parts")
            return None, None

        command_name = parts[0].upper()
        logger.log(TRACE, "match_start name=%s parts=%d", command_name, len(parts))

        command_class = self.get_command_class(command_name)
        if command_class is None:
            logger.debug("No command registered for: %s", command_name)
            return None, None

        command = command_class()
        can_handle, error = command.match(parts)
        if can_handle:
            logger.log(TRACE, "match_ok name=%s", command_name)
            return command, None

        logger.log(TRACE, "match_error name=%s err=%s", command_name, error)
        return None, error or "Command validation failed"

    def clear(self) -> None:
        """
        Clear all registered commands; the next lookup rediscovers them.
        """
        self._commands.clear()
        self._discovered = False
        logger.debug("Command registry cleared")


# Global registry instance
_registry = CommandRegistry()


def register_command(name: str) -> Callable[[type[CommandBase]], type[CommandBase]]:
    """
    Decorator to register a command class.

    Usage:
        @register_command("MOVE")
        class MoveCommand(MotionCommand):
            ...
    """

    def decorator(cls: type[CommandBase]) -> type[CommandBase]:
        if not issubclass(cls, CommandBase):
            raise TypeError(f"Class {cls.__name__} must inherit from CommandBase")

        _registry.register(name, cls)
        cls._registered_name = name.upper()
        return cls

    return decorator


# Module-level convenience functions that delegate to the registry singleton
get_command_class = _registry.get_command_class
discover_commands = _registry.discover_commands
clear_registry = _registry.clear
create_command_from_parts = _registry.create_command_from_parts
