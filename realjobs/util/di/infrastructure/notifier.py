"""Realtime notification providers."""

from dishka import Scope, provide

from realjobs.adapter.notifier import InMemoryCommentNotifier
from realjobs.domain.service import CommentNotifier
from realjobs.util.di.base import ProviderBase


class NotifierProvider(ProviderBase):
    """Comment notifier provider - concrete, one broker per process."""

    @provide(scope=Scope.APP)
    def get_comment_notifier(self) -> CommentNotifier:
        """Provide in-process comment broker."""
        return InMemoryCommentNotifier()
