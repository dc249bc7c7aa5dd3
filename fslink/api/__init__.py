"""API module for fslink.

Command functions defined here are the single source of truth for the CLI.
Each returns a StageResult that the CLI drives and renders.
"""

__all__ = []
