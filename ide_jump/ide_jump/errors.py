"""
Error handling module for ide_jump.

Every failure in a jump is terminal but local: it is reported to the user as a
message and never retried. This module provides:
- the error taxonomy (ErrorType)
- a result object with remediation hints (ErrorResult)
- the exceptions raised before a launch is attempted (JumpError and subclasses)
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ErrorType(Enum):
    """Types of errors that can occur while jumping to an IDE."""
    NO_FILE_CONTEXT = "no_file_context"
    NO_PROJECT_ROOT = "no_project_root"
    LAUNCH_FAILURE = "launch_failure"
    CONFIG_ERROR = "config_error"


@dataclass
class ErrorResult:
    """
    Result of error analysis with remediation suggestions.

    Attributes:
        error_type: The type of error detected
        message: Human-readable error message
        remediation_steps: List of suggested remediation steps
        raw_error: The original error message/exception
    """
    error_type: ErrorType
    message: str
    remediation_steps: List[str] = field(default_factory=list)
    raw_error: str = ""

    def format(self) -> str:
        """Format the error with its remediation steps for display."""
        lines = [self.message]
        if self.remediation_steps:
            lines.append("")
            lines.append("You may want to:")
            lines.extend(f"  • {step}" for step in self.remediation_steps)
        return "\n".join(lines)


REMEDIATION: dict = {
    ErrorType.NO_FILE_CONTEXT: [
        "Pass the file to open as the first argument",
        "Check that the file has been saved to disk",
    ],
    ErrorType.NO_PROJECT_ROOT: [
        "Pass --project-root with an existing directory",
        "Run from inside the project directory",
        "Enable fallback_to_cwd in the config file",
    ],
    ErrorType.LAUNCH_FAILURE: [
        "Check that the IDE command-line launcher is installed",
        "Pin the executable with /override set <ide> <absolute path>",
        "Add the launcher's directory to search_dirs in the config file",
    ],
    ErrorType.CONFIG_ERROR: [
        "Fix or delete the config file to restore defaults",
    ],
}


def make_error(error_type: ErrorType, message: str, raw_error: str = "") -> ErrorResult:
    """Create an ErrorResult with the standard remediation steps for its type."""
    return ErrorResult(
        error_type=error_type,
        message=message,
        remediation_steps=list(REMEDIATION.get(error_type, [])),
        raw_error=raw_error,
    )


class JumpError(Exception):
    """Base class for failures detected before a launch is attempted."""

    error_type: ErrorType = ErrorType.LAUNCH_FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_result(self) -> ErrorResult:
        """Convert to an ErrorResult for display."""
        return make_error(self.error_type, self.message)


class NoFileContextError(JumpError):
    """No file is associated with the current editing context."""

    error_type = ErrorType.NO_FILE_CONTEXT


class NoProjectRootError(JumpError):
    """No project root could be discovered by any strategy."""

    error_type = ErrorType.NO_PROJECT_ROOT


class ConfigError(Exception):
    """Error raised when the configuration file cannot be used."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message
