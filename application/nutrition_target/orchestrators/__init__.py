"""Orchestrators for nutrition target calculation."""

from .target_orchestrator import TargetOrchestrator

__all__ = ["TargetOrchestrator"]
