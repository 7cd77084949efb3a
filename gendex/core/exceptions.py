"""
Custom exception hierarchy for gendex.

All exceptions inherit from GendexError so the CLI can map any pipeline failure
to a non-zero exit status. Each exception type carries the context a human needs
to diagnose an SDK or toolchain misconfiguration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class GendexError(Exception):
    """Base exception for all gendex errors."""

    message: str
    context: dict[str, Any] = field(default_factory=dict)
    cause: Exception | None = None

    def __str__(self) -> str:
        ctx = f" | context: {self.context}" if self.context else ""
        cause = f" | caused by: {self.cause}" if self.cause else ""
        return f"{self.message}{ctx}{cause}"


@dataclass
class SdkNotFoundError(GendexError):
    """Raised when no Android SDK root can be located."""

    searched_path: str = ""

    def __str__(self) -> str:
        return f"couldn't find Android SDK: {super().__str__()}"


@dataclass
class EmptyVersionDirectoryError(GendexError):
    """Raised when a versioned SDK directory is empty or cannot be listed."""

    directory: str = ""


@dataclass
class NoSourceFilesFoundError(GendexError):
    """Raised when the Java source glob matches nothing."""

    pattern: str = ""


@dataclass
class ToolInvocationError(GendexError):
    """Raised when an external tool exits non-zero."""

    tool_name: str = ""
    command: list[str] = field(default_factory=list)
    output: str = ""
    returncode: int = 0

    def __str__(self) -> str:
        return f"[{self.tool_name}] exit status {self.returncode}: {self.message}"


@dataclass
class CompileError(ToolInvocationError):
    """Raised when the Java compiler fails."""


@dataclass
class LinkError(ToolInvocationError):
    """Raised when the DEX linker fails."""


@dataclass
class ToolNotFoundError(GendexError):
    """Raised when a required external tool is not available."""

    tool_name: str = ""
    expected_path: str = ""
    install_hint: str = ""

    def __str__(self) -> str:
        hint = f" Install hint: {self.install_hint}" if self.install_hint else ""
        return f"Tool '{self.tool_name}' not found at '{self.expected_path}'.{hint}"


@dataclass
class ReadArtifactError(GendexError):
    """Raised when the linked DEX file cannot be read."""

    artifact_path: str = ""


@dataclass
class FormatError(GendexError):
    """Raised when the generated module does not survive formatting.

    The unformatted buffer is kept so it can be shown for diagnosis.
    """

    raw_source: str = ""


@dataclass
class WriteOutputError(GendexError):
    """Raised when the generated module cannot be written in full."""

    output_path: str = ""



@dataclass
class WorkspaceError(GendexError):
    """Raised when the temporary workspace cannot be created."""

    temp_root: str = ""


@dataclass
class ConfigError(GendexError):
    """Raised when environment configuration is malformed."""

    def __str__(self) -> str:
        return f"invalid configuration: {super().__str__()}"
