"""Domain model entities for the job board."""

from realjobs.domain.model.bookmark import Bookmark
from realjobs.domain.model.comment import Comment
from realjobs.domain.model.job import JobPosting
from realjobs.domain.model.profile import Profile
from realjobs.domain.model.user import CurrentUser
from realjobs.domain.model.vote import CommentVote, Vote, VoteTally

__all__ = [
    "JobPosting",
    "Vote",
    "CommentVote",
    "VoteTally",
    "Comment",
    "Bookmark",
    "CurrentUser",
    "Profile",
]
