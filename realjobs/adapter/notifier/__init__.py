"""In-process comment notification adapter."""

from .memory import InMemoryCommentNotifier

__all__ = ["InMemoryCommentNotifier"]
