"""Coordinators - Orchestration layer connecting input sources with business logic."""

from .capture_coordinator import CaptureCoordinator, CapturePipelineState
from .review_coordinator import ReviewCoordinator

__all__ = [
    "CaptureCoordinator",
    "CapturePipelineState",
    "ReviewCoordinator",
]
