"""
Configuration management for gendex.

Provides centralized, type-safe configuration with environment variable overrides
for every constant the generator bakes in (language level, source glob, linker
name, output variable).
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError

# Load .env file if it exists (looks in cwd and parent directories)
load_dotenv()

DEFAULT_HEADER = """\
# Copyright 2015 The gendex Authors.  All rights reserved.
# Use of this source code is governed by a BSD-style
# license that can be found in the LICENSE file.
"""


class SdkConfig(BaseModel):
    """Android SDK layout."""

    home_env_var: str = Field(default="ANDROID_HOME", description="SDK root override variable")
    platforms_dir: str = Field(default="platforms", description="Per-API-level library parent")
    build_tools_dir: str = Field(default="build-tools", description="Linking utilities parent")
    boot_jar: str = Field(default="android.jar", description="Boot classpath jar in a platform")


class ToolchainConfig(BaseModel):
    """External compiler and linker configuration."""

    javac: str = Field(default="javac", description="Java compiler executable")
    java_level: str = Field(
        default="1.8",
        description="-source/-target level, kept low for the oldest supported runtime",
    )
    dex_tool: str = Field(default="dx", description="DEX linker name under build-tools")
    source_glob: str = Field(default="../../app/*.java", description="Java sources to compile")
    package_path: str = Field(
        default="org/golang/app", description="Package directory created under work/"
    )


class EmitConfig(BaseModel):
    """Generated module configuration."""

    variable_name: str = Field(default="DEX_STR", description="Name bound to the payload")
    chunk_width: int = Field(default=70, ge=1, le=70, description="Characters per literal chunk")
    line_length: int = Field(default=88, ge=40, description="Formatter line length")
    header: str = Field(default=DEFAULT_HEADER, description="License block")
    generator_name: str = Field(default="gendex", description="Name in the DO NOT EDIT marker")


class WorkspaceConfig(BaseModel):
    """Temporary workspace configuration."""

    prefix: str = Field(default="gendex-", description="Temp directory name prefix")
    temp_root: Path | None = Field(default=None, description="Parent for temp directories")


class Config(BaseModel):
    """Root configuration for gendex."""

    project_name: str = Field(default="gendex", description="Project identifier")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    sdk: SdkConfig = Field(default_factory=SdkConfig)
    toolchain: ToolchainConfig = Field(default_factory=ToolchainConfig)
    emit: EmitConfig = Field(default_factory=EmitConfig)
    workspace: WorkspaceConfig = Field(default_factory=WorkspaceConfig)

    model_config = {"extra": "ignore"}

    @classmethod
    def from_env(cls) -> Config:
        """Create configuration from environment variables.

        Raises:
            ConfigError: If a variable holds a value the model rejects.
        """
        temp_root = os.environ.get("GENDEX_TEMP_ROOT")
        try:
            return cls(
                log_level=os.environ.get("GENDEX_LOG_LEVEL", "INFO"),  # type: ignore
                toolchain=ToolchainConfig(
                    javac=os.environ.get("GENDEX_JAVAC", "javac"),
                    java_level=os.environ.get("GENDEX_JAVA_LEVEL", "1.8"),
                    dex_tool=os.environ.get("GENDEX_DEX_TOOL", "dx"),
                    source_glob=os.environ.get("GENDEX_SOURCE_GLOB", "../../app/*.java"),
                    package_path=os.environ.get("GENDEX_PACKAGE_PATH", "org/golang/app"),
                ),
                emit=EmitConfig(
                    variable_name=os.environ.get("GENDEX_VARIABLE_NAME", "DEX_STR"),
                ),
                workspace=WorkspaceConfig(
                    temp_root=Path(temp_root) if temp_root else None,
                ),
            )
        except ValidationError as e:
            raise ConfigError(message=str(e).splitlines()[0], cause=e) from e


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config.from_env()
