"""
Core type definitions for gendex.

Provides the pipeline state machine and the in-memory record of a run, used by
the orchestrator for reporting.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


ArtifactPath = Path


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PipelineState(str, Enum):
    """States of the generation pipeline, in order."""

    INIT = "init"
    WORKSPACE_READY = "workspace_ready"
    SOURCES_FOUND = "sources_found"
    COMPILED = "compiled"
    LINKED = "linked"
    ENCODED = "encoded"
    WRITTEN = "written"
    DONE = "done"
    FAILED = "failed"


# Linear chain; FAILED is reachable from every non-terminal state.
_NEXT_STATE: dict[PipelineState, PipelineState] = {
    PipelineState.INIT: PipelineState.WORKSPACE_READY,
    PipelineState.WORKSPACE_READY: PipelineState.SOURCES_FOUND,
    PipelineState.SOURCES_FOUND: PipelineState.COMPILED,
    PipelineState.COMPILED: PipelineState.LINKED,
    PipelineState.LINKED: PipelineState.ENCODED,
    PipelineState.ENCODED: PipelineState.WRITTEN,
    PipelineState.WRITTEN: PipelineState.DONE,
}


class StateTransition(BaseModel):
    """A single state change recorded during a run."""

    state: PipelineState
    at: datetime = Field(default_factory=_utcnow)


class PipelineRun(BaseModel):
    """Represents a single generator execution."""

    run_id: str = Field(description="Unique run identifier")
    output_path: Path = Field(description="Requested output file")
    state: PipelineState = Field(default=PipelineState.INIT)
    history: list[StateTransition] = Field(default_factory=list)
    started_at: datetime = Field(default_factory=_utcnow)
    completed_at: datetime | None = Field(default=None)
    failed_stage: PipelineState | None = Field(
        default=None, description="State the run was in when it failed"
    )
    error_message: str | None = Field(default=None)
    metadata: dict[str, Any] = Field(default_factory=dict)

    def advance(self, state: PipelineState) -> None:
        """Move to the next state in the chain.

        Raises:
            ValueError: If ``state`` does not follow the current state.
        """
        expected = _NEXT_STATE.get(self.state)
        if state is not expected:
            raise ValueError(f"Invalid transition {self.state.value} -> {state.value}")
        self.state = state
        self.history.append(StateTransition(state=state))
        if state is PipelineState.DONE:
            self.completed_at = _utcnow()

    def mark_failed(self, error: str) -> None:
        """Enter the absorbing failure state."""
        if self.state in (PipelineState.DONE, PipelineState.FAILED):
            raise ValueError(f"Cannot fail a run in state {self.state.value}")
        self.failed_stage = self.state
        self.state = PipelineState.FAILED
        self.error_message = error
        self.history.append(StateTransition(state=PipelineState.FAILED))
        self.completed_at = _utcnow()

    @property
    def success(self) -> bool:
        return self.state is PipelineState.DONE

    @property
    def duration_seconds(self) -> float:
        if self.completed_at is None:
            return 0.0
        return (self.completed_at - self.started_at).total_seconds()
