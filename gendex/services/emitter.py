"""
Emitter Service.

Turns the linked DEX bytes into a generated Python module holding the payload
as a base64 string literal, split into fixed-width chunks joined with ``+``.
"""

from __future__ import annotations

import base64
from pathlib import Path

import black

from ..core.config import EmitConfig
from ..core.exceptions import FormatError, WriteOutputError
from ..core.logging import get_logger

logger = get_logger(__name__)


def encode_payload(data: bytes) -> str:
    """Standard-alphabet base64, no line wrapping."""
    return base64.b64encode(data).decode("ascii")


def chunk_payload(text: str, width: int = 70) -> list[str]:
    """Split ``text`` into ``width``-sized pieces; the last may be shorter."""
    if width < 1:
        raise ValueError(f"chunk width must be positive, got {width}")
    return [text[i : i + width] for i in range(0, len(text), width)]


def render_module(chunks: list[str], config: EmitConfig | None = None) -> str:
    """Build the unformatted module source.

    The trailing empty literal keeps the expression valid when there are no
    chunks at all.
    """
    config = config or EmitConfig()
    lines = [
        config.header.rstrip("\n"),
        "",
        f"# Code generated by {config.generator_name}. DO NOT EDIT.",
        "",
        f"{config.variable_name} = (",
    ]
    lines.extend(f'\t"{chunk}" +' for chunk in chunks)
    lines.append('\t""')
    lines.append(")")
    return "\n".join(lines) + "\n"


def format_module(source: str, line_length: int = 88) -> str:
    """Run the generated source through black.

    Raises:
        FormatError: If black rejects the source; the raw buffer is attached.
    """
    try:
        return black.format_str(source, mode=black.Mode(line_length=line_length))
    except black.InvalidInput as e:
        raise FormatError(
            message="generated module is not valid Python",
            raw_source=source,
            cause=e,
        ) from e


def write_output(path: Path, data: bytes) -> None:
    """Write ``data`` to ``path`` in full.

    Raises:
        WriteOutputError: If the file cannot be created or the write is short.
    """
    try:
        with open(path, "wb") as f:
            written = f.write(data)
    except OSError as e:
        raise WriteOutputError(
            message=f"cannot write {path}",
            output_path=str(path),
            cause=e,
        ) from e

    if written != len(data):
        raise WriteOutputError(
            message=f"short write to {path}: {written} of {len(data)} bytes",
            output_path=str(path),
        )


class EmitterService:
    """Service rendering a DEX payload into a generated module on disk."""

    def __init__(self, config: EmitConfig | None = None) -> None:
        self.config = config or EmitConfig()

    def render(self, dex_bytes: bytes) -> str:
        """Encode, chunk, render and format ``dex_bytes``."""
        payload = encode_payload(dex_bytes)
        chunks = chunk_payload(payload, self.config.chunk_width)
        logger.info("Encoded DEX payload", dex_bytes=len(dex_bytes), chunks=len(chunks))
        return format_module(render_module(chunks, self.config), self.config.line_length)

    def write(self, source: str, output_path: Path) -> None:
        """Write formatted ``source`` to ``output_path``."""
        write_output(output_path, source.encode("utf-8"))
        logger.info("Wrote generated module", path=str(output_path))

    def emit(self, dex_bytes: bytes, output_path: Path) -> str:
        """Render ``dex_bytes`` and write the module to ``output_path``."""
        source = self.render(dex_bytes)
        self.write(source, output_path)
        return source
