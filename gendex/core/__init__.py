"""Core infrastructure components for gendex."""

from .config import Config, get_config
from .exceptions import (
    CompileError,
    ConfigError,
    EmptyVersionDirectoryError,
    FormatError,
    GendexError,
    LinkError,
    NoSourceFilesFoundError,
    ReadArtifactError,
    SdkNotFoundError,
    ToolInvocationError,
    ToolNotFoundError,
    WorkspaceError,
    WriteOutputError,
)
from .logging import get_logger, setup_logging
from .types import ArtifactPath, PipelineRun, PipelineState

__all__ = [
    "Config",
    "get_config",
    "CompileError",
    "ConfigError",
    "EmptyVersionDirectoryError",
    "FormatError",
    "GendexError",
    "LinkError",
    "NoSourceFilesFoundError",
    "ReadArtifactError",
    "SdkNotFoundError",
    "ToolInvocationError",
    "ToolNotFoundError",
    "WorkspaceError",
    "WriteOutputError",
    "get_logger",
    "setup_logging",
    "ArtifactPath",
    "PipelineRun",
    "PipelineState",
]
