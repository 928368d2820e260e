"""
Custom exception hierarchy for colb.

Every failure the CLI can report maps onto one of these types. The CLI
layer turns them into a message on stderr and an exit code, so services
raise instead of calling sys.exit themselves.
"""

from __future__ import annotations

# Exit code used for fatal errors that are not a child's exit status.
FATAL_EXIT_CODE = 255


class ColbException(Exception):
    """
    Base exception for all colb errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (paths, tool names, etc.)
        exit_code: Exit code the CLI should terminate with
    """

    exit_code: int = FATAL_EXIT_CODE

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ColbConfigError(ColbException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(ColbConfigError):
    """
    Error reading or writing the configuration file.

    Raised for permission errors, unreadable files, failed writes, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigParseError(ConfigFileError):
    """The configuration file is not valid TOML or violates the schema."""

    pass


class ConfigExistsError(ConfigFileError):
    """Refusing to overwrite an existing configuration file."""

    pass


# =============================================================================
# Resolution Errors
# =============================================================================


class ColbResolutionError(ColbException):
    """Base class for workspace/package resolution failures."""

    pass


class PackageNotFoundError(ColbResolutionError):
    """No package was given and none could be detected from the cwd."""

    def __init__(
        self,
        message: str = "Could not detect package, try specifying it explicitly!",
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context=context, cause=cause)


class WorkspaceNotFoundError(ColbResolutionError):
    """An explicitly given workspace does not exist."""

    def __init__(
        self,
        message: str,
        *,
        workspace: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if workspace:
            ctx["workspace"] = workspace
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Execution Errors
# =============================================================================


class ColbExecutionError(ColbException):
    """Base class for errors while launching external tools."""

    pass


class ToolNotFoundError(ColbExecutionError):
    """
    An external executable (colcon, ninja, ctest) could not be found.

    Always fatal: there is no exit status to propagate.
    """

    def __init__(
        self,
        tool: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.tool = tool
        super().__init__(f"'{tool}' not found", context=context, cause=cause)


class ToolLaunchError(ColbExecutionError):
    """An external executable exists but could not be started."""

    def __init__(
        self,
        message: str,
        *,
        tool: str | None = None,
        cwd: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if tool:
            ctx["tool"] = tool
        if cwd:
            ctx["cwd"] = cwd
        super().__init__(message, context=ctx, cause=cause)


class EditorError(ColbExecutionError):
    """$EDITOR is unset or could not be launched."""

    pass


class PhaseFailed(ColbExecutionError):
    """
    A child process ran and exited with a non-zero status.

    The status is propagated verbatim as colb's own exit code.
    """

    def __init__(self, status: int, *, command: str | None = None) -> None:
        self.status = status
        self.exit_code = status
        ctx = {"exit_code": status}
        if command:
            ctx["command"] = command
        super().__init__(f"Command exited with status {status}", context=ctx)


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidArgumentError(ColbException, ValueError):
    """
    Invalid command-line argument.

    Inherits from ValueError so callers validating input can catch either.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)
