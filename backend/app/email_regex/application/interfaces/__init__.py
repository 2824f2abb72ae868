# Ports for external integrations (TutorialSource)

from .tutorial_source import TutorialSource

__all__ = [
    "TutorialSource",
]
