"""Strongly typed identifiers for job board entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
JobId = NewType("JobId", UUID)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)
CommentVoteId = NewType("CommentVoteId", UUID)
