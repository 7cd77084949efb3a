"""Orchestration module for gendex."""

from .pipeline import GendexPipeline, read_artifact, run_pipeline

__all__ = [
    "GendexPipeline",
    "read_artifact",
    "run_pipeline",
]
