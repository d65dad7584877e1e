"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .bookmark_service import BookmarkService
from .comment_service import CommentNode, CommentService, build_comment_tree, can_reply
from .job_service import JobService
from .moderation_service import ModerationService, SentimentClassifier
from .notifier import CommentNotifier
from .profile_service import ProfileActivity, ProfileService, username_from_email
from .ranking_service import (
    RankedJob,
    RankedPage,
    RankingService,
    fake_cut,
    hot_score,
    matches,
    order,
)
from .trust_service import TrustService, badge_color, derive_badge
from .vote_service import VoteOutcome, VoteService

__all__ = [
    "AuthService",
    "BookmarkService",
    "CommentNode",
    "CommentNotifier",
    "CommentService",
    "JobService",
    "ModerationService",
    "RankedJob",
    "RankedPage",
    "RankingService",
    "SentimentClassifier",
    "Service",
    "TrustService",
    "ProfileActivity",
    "ProfileService",
    "VoteOutcome",
    "VoteService",
    "badge_color",
    "build_comment_tree",
    "can_reply",
    "derive_badge",
    "fake_cut",
    "hot_score",
    "matches",
    "order",
    "username_from_email",
]
