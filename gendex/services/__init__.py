"""
gendex services.

Each service wraps one step of the generation pipeline.
"""

from .emitter import EmitterService, chunk_payload, encode_payload, format_module, render_module
from .sources import find_sources
from .toolchain import ToolchainService, run_process
from .workspace import Workspace, acquire, release, scoped_workspace

__all__ = [
    "EmitterService",
    "chunk_payload",
    "encode_payload",
    "format_module",
    "render_module",
    "find_sources",
    "ToolchainService",
    "run_process",
    "Workspace",
    "acquire",
    "release",
    "scoped_workspace",
]
