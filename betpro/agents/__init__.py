"""AI agents."""

from .insights_agent import InsightsAgent

__all__ = ["InsightsAgent"]
