"""
LLM integration for HevySpotter.

Provides the OpenAI-backed coach used for workout analysis and for
designing routines that are written back to Hevy.
"""

from services.llm.client import OpenAICoachClient

__all__ = [
    "OpenAICoachClient",
]
