"""Visualization helpers for StakingLab."""

from .visualizer import Visualizer

__all__ = ["Visualizer"]
