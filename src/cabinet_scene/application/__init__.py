"""Application layer - use cases and configuration."""

from .commands import BuildSceneCommand
from .dtos import SceneBuildOutput

__all__ = [
    "BuildSceneCommand",
    "SceneBuildOutput",
]
