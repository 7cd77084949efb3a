"""Test configuration for gendex."""

import re
import subprocess
import tempfile
from pathlib import Path

import pytest

from gendex.core.config import Config, ToolchainConfig, WorkspaceConfig

DEX_PAYLOAD = b"dex\n"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests.

    Yields:
        Path: A Path object pointing to the temporary directory.
            The directory is automatically cleaned up after the test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fake_sdk(temp_dir, monkeypatch):
    """Create a minimal SDK layout and point ANDROID_HOME at it.

    Returns:
        Path: The SDK root, holding one platform and one build-tools version.
    """
    sdk = temp_dir / "sdk"
    platform = sdk / "platforms" / "android-33"
    platform.mkdir(parents=True)
    (platform / "android.jar").write_bytes(b"PK")
    build_tools = sdk / "build-tools" / "33.0.2"
    build_tools.mkdir(parents=True)
    (build_tools / "dx").write_text("#!/bin/sh\n")
    monkeypatch.setenv("ANDROID_HOME", str(sdk))
    return sdk


@pytest.fixture
def java_sources(temp_dir):
    """Write one trivial Java source defining an empty class.

    Returns:
        Path: The directory holding the source.
    """
    src_dir = temp_dir / "app"
    src_dir.mkdir()
    (src_dir / "GoNativeActivity.java").write_text(
        "package org.golang.app;\n\npublic class GoNativeActivity {}\n"
    )
    return src_dir


@pytest.fixture
def workspace_root(temp_dir):
    """Parent directory for pipeline workspaces, so tests can check cleanup."""
    root = temp_dir / "workspaces"
    root.mkdir()
    return root


@pytest.fixture
def config(java_sources, workspace_root):
    """Configuration wired to the test sources and workspace root."""
    return Config(
        toolchain=ToolchainConfig(source_glob=str(java_sources / "*.java")),
        workspace=WorkspaceConfig(temp_root=workspace_root),
    )


class StubToolchain:
    """Stands in for javac and dx.

    The compiler writes a placeholder ``.class`` into its ``-d`` directory and
    the linker writes ``payload`` to its ``--output`` path. Either can be told
    to fail.
    """

    def __init__(self, payload: bytes = DEX_PAYLOAD) -> None:
        self.payload = payload
        self.calls: list[list[str]] = []
        self.fail_compile = False
        self.fail_link = False
        self.skip_dex = False

    def __call__(self, cmd: list[str]) -> subprocess.CompletedProcess:
        self.calls.append(cmd)
        if Path(cmd[0]).name == "javac":
            return self._compile(cmd)
        return self._link(cmd)

    @property
    def compiler_calls(self) -> list[list[str]]:
        return [c for c in self.calls if Path(c[0]).name == "javac"]

    @property
    def workspaces(self) -> list[Path]:
        """Workspace roots seen on compiler command lines."""
        return [Path(c[c.index("-d") + 1]).parent for c in self.compiler_calls]

    def _compile(self, cmd: list[str]) -> subprocess.CompletedProcess:
        if self.fail_compile:
            return subprocess.CompletedProcess(cmd, 1, stdout="Empty.java:1: error: ';' expected\n")
        out_dir = Path(cmd[cmd.index("-d") + 1]) / "org" / "golang" / "app"
        (out_dir / "GoNativeActivity.class").write_bytes(b"\xca\xfe\xba\xbe")
        return subprocess.CompletedProcess(cmd, 0, stdout="")

    def _link(self, cmd: list[str]) -> subprocess.CompletedProcess:
        if self.fail_link:
            return subprocess.CompletedProcess(cmd, 2, stdout="UNEXPECTED TOP-LEVEL EXCEPTION\n")
        if not self.skip_dex:
            output = next(a for a in cmd if a.startswith("--output="))
            Path(re.sub(r"^--output=", "", output)).write_bytes(self.payload)
        return subprocess.CompletedProcess(cmd, 0, stdout="")


@pytest.fixture
def stub_toolchain():
    """A fresh stub process runner."""
    return StubToolchain()
