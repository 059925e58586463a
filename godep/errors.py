"""Errors raised by the graph commands."""

from __future__ import annotations


class GodepError(Exception):
    """Base class for failures that terminate a command."""


class UnrecognizedModuleError(GodepError):
    """An edge refers to a module that is not in the node set.

    ``side`` is ``"module"`` for the depending end of the edge and
    ``"dependency"`` for the end being depended on.
    """

    def __init__(self, module: str, side: str):
        self.module = module
        self.side = side
        if side == "dependency":
            message = f"unrecognised module dependency: {module}"
        else:
            message = f"unrecognised module: {module}"
        super().__init__(message)


class ToolError(GodepError):
    """An external tool could not be run or exited unsuccessfully."""

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        returncode: int | None = None,
        stderr: str = "",
    ):
        self.command = list(command or [])
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class CommandCancelled(ToolError):
    """The caller cancelled an external tool before it finished."""


class SourceDecodeError(GodepError):
    """The module graph source is not valid UTF-8."""
