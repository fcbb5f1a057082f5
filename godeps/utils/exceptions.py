"""
Exception hierarchy for external package queries.

Every failure while talking to the ``go`` tool ends up as one of:

- ToolUnavailableError: the binary is missing or cannot be executed
- QueryFailedError: the command wrote to stderr or exited non-zero
- MalformedResponseError: the output could not be parsed

None of them are retried. The service layer reports the message and exits
with a non-zero status.
"""

from typing import Optional, Sequence


class GodepsError(Exception):
    """
    Base exception for all godeps errors.

    Carries the command that failed and a suggested action so the CLI can
    print a single actionable line.
    """

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        original_exception: Optional[Exception] = None,
        suggested_action: Optional[str] = None,
    ):
        """
        Initialize GodepsError.

        Args:
            message: Human-readable error message
            command: Command line that failed (e.g., ["go", "list", "-json", "fmt"])
            original_exception: The original exception that was caught
            suggested_action: Suggested action for the user to resolve the issue
        """
        self.message = message
        self.command = list(command) if command else None
        self.original_exception = original_exception
        self.suggested_action = suggested_action

        error_parts = [message]

        if self.command:
            error_parts.append(f"Command: {_format_command(self.command)}")

        if suggested_action:
            error_parts.append(f"Action: {suggested_action}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class ToolUnavailableError(GodepsError):
    """
    Raised when the external tool cannot be started.

    This typically indicates:
    - The binary is not installed
    - The binary is not on PATH
    - The binary is not executable
    """

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            command=command,
            original_exception=original_exception,
            suggested_action="Install Go from https://go.dev/dl/ and make sure it is on PATH",
        )


class QueryFailedError(GodepsError):
    """Raised when a command reports an error on stderr or exits non-zero."""

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        stderr: Optional[str] = None,
        exit_code: Optional[int] = None,
        original_exception: Optional[Exception] = None,
        suggested_action: Optional[str] = None,
    ):
        """
        Initialize QueryFailedError.

        Args:
            message: Human-readable error message
            command: Command line that failed
            stderr: Error stream of the command, if any
            exit_code: Exit status of the command, if it finished
            original_exception: The original exception, if any
            suggested_action: Suggested action for the user
        """
        self.stderr = stderr
        self.exit_code = exit_code

        if stderr:
            message = f"{message}: {stderr.strip()}"
        elif exit_code is not None:
            message = f"{message} (exit status {exit_code})"

        super().__init__(
            message=message,
            command=command,
            original_exception=original_exception,
            suggested_action=suggested_action,
        )


class QueryTimeoutError(QueryFailedError):
    """Raised when a command does not finish within the configured timeout."""

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        timeout_duration: Optional[float] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.timeout_duration = timeout_duration

        suggested_action = "Increase query.timeout in the configuration"
        if timeout_duration:
            suggested_action += f" (timeout after {timeout_duration}s)"

        super().__init__(
            message=message,
            command=command,
            original_exception=original_exception,
            suggested_action=suggested_action,
        )


class MalformedResponseError(GodepsError):
    """Raised when command output does not have the expected shape."""

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        output: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.output = output
        super().__init__(
            message=message,
            command=command,
            original_exception=original_exception,
        )


class ConfigurationError(GodepsError):
    """Invalid configuration value or file."""
    pass


def _format_command(command: Sequence[str]) -> str:
    text = " ".join(command)
    # Metadata queries can carry thousands of characters of import paths
    if len(text) > 200:
        text = text[:197] + "..."
    return text
