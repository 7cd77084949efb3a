"""
Toolchain Service.

Drives the external Java compiler and DEX linker. Both are opaque processes:
this module only builds their command lines, waits for them and turns a non-zero
exit into a typed error carrying the combined output.
"""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from ..core.config import ToolchainConfig
from ..core.exceptions import CompileError, LinkError, ToolInvocationError, ToolNotFoundError
from ..core.logging import get_logger

logger = get_logger(__name__)

ProcessRunner = Callable[[list[str]], "subprocess.CompletedProcess[str]"]


def run_process(cmd: list[str]) -> subprocess.CompletedProcess[str]:
    """Run ``cmd`` to completion with stderr folded into stdout."""
    return subprocess.run(
        cmd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors="replace",
        check=False,
    )


class ToolchainService:
    """Service for compiling Java sources and linking them into a DEX file."""

    def __init__(
        self,
        config: ToolchainConfig | None = None,
        runner: ProcessRunner | None = None,
    ) -> None:
        """Initialize the toolchain service.

        Args:
            config: Compiler and linker settings
            runner: Process runner; defaults to a blocking ``subprocess.run``
        """
        self.config = config or ToolchainConfig()
        self.runner = runner or run_process

    def _invoke(
        self,
        tool_name: str,
        cmd: list[str],
        error_cls: type[ToolInvocationError],
        install_hint: str,
    ) -> str:
        logger.info("Running command", tool=tool_name, command=" ".join(cmd))
        try:
            result = self.runner(cmd)
        except (FileNotFoundError, PermissionError) as e:
            raise ToolNotFoundError(
                message=f"Tool not found or not executable: {tool_name}",
                tool_name=tool_name,
                expected_path=cmd[0],
                install_hint=install_hint,
                cause=e,
            ) from e
        except OSError as e:
            raise error_cls(
                message=f"cannot start {tool_name}: {e}",
                tool_name=tool_name,
                command=cmd,
                returncode=-1,
                cause=e,
            ) from e

        output = result.stdout or ""
        if result.returncode != 0:
            logger.error(
                "Command failed",
                tool=tool_name,
                returncode=result.returncode,
                command=cmd,
            )
            raise error_cls(
                message=f"{tool_name} failed",
                tool_name=tool_name,
                command=cmd,
                output=output,
                returncode=result.returncode,
            )

        logger.debug("Command completed", tool=tool_name, output_chars=len(output))
        return output

    def compile_sources(
        self, sources: Sequence[Path], boot_classpath: Path, output_dir: Path
    ) -> None:
        """Compile ``sources`` into ``.class`` files under ``output_dir``.

        Raises:
            CompileError: If the compiler exits non-zero.
            ToolNotFoundError: If the compiler executable is missing.
        """
        level = self.config.java_level
        cmd = [
            self.config.javac,
            "-source", level,
            "-target", level,
            "-bootclasspath", str(boot_classpath),
            "-d", str(output_dir),
        ]
        cmd.extend(str(src) for src in sources)
        self._invoke(
            "javac",
            cmd,
            CompileError,
            install_hint="Install a JDK and add javac to PATH",
        )

    def link_classes(self, build_tools: Path, class_dir: Path, output_dex: Path) -> None:
        """Link the class tree under ``class_dir`` into a single DEX file.

        Raises:
            LinkError: If the linker exits non-zero.
            ToolNotFoundError: If the linker is missing from ``build_tools``.
        """
        tool = build_tools / self.config.dex_tool
        cmd = [
            str(tool),
            "--dex",
            f"--output={output_dex}",
            str(class_dir),
        ]
        self._invoke(
            self.config.dex_tool,
            cmd,
            LinkError,
            install_hint=f"Install an Android build-tools version that ships {self.config.dex_tool}",
        )
