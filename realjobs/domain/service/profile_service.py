"""Profile domain service."""

from dataclasses import dataclass, field
from datetime import datetime

import logfire

from realjobs.config import ProfileSettings
from realjobs.domain.error import NotFoundError, ValidationError
from realjobs.domain.model.comment import Comment
from realjobs.domain.model.common import utcnow
from realjobs.domain.model.profile import Profile
from realjobs.domain.repository import (
    CommentRepository,
    JobRepository,
    ProfileRepository,
)
from realjobs.domain.value import JobId, UserId, is_http_url

from .base import Service
from .ranking_service import RankedJob, RankingService


def username_from_email(email: str | None, max_length: int = 30) -> str:
    """Default username: the local part of the email, or ``user``."""
    local = (email or "").split("@", 1)[0].strip()
    return local[:max_length] or "user"


@dataclass(frozen=True)
class ProfileActivity:
    """What a profile page shows besides the profile itself."""

    postings: list[RankedJob] = field(default_factory=list)
    recent_comments: list[Comment] = field(default_factory=list)
    job_titles: dict[JobId, str] = field(default_factory=dict)
    total_jobs: int = 0
    total_comments: int = 0


class ProfileService(Service):
    """Domain service for public user profiles."""

    def __init__(
        self,
        profile_repository: ProfileRepository,
        job_repository: JobRepository,
        comment_repository: CommentRepository,
        ranking_service: RankingService,
        profile_settings: ProfileSettings,
    ) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
            job_repository: Job repository (a user's postings)
            comment_repository: Comment repository (a user's comments)
            ranking_service: Annotates postings with counts and badges
            profile_settings: Profile limits
        """
        self.profile_repository = profile_repository
        self.job_repository = job_repository
        self.comment_repository = comment_repository
        self.ranking_service = ranking_service
        self.settings = profile_settings

    async def ensure_profile(self, user_id: UserId, email: str | None = None) -> Profile:
        """Get the user's profile, creating it on first use.

        New profiles take their username from the email. When that name is
        taken, a short suffix from the user ID is appended.

        Args:
            user_id: Authenticated user
            email: The user's email, if the auth provider supplied one

        Returns:
            The existing or newly created profile
        """
        existing = await self.profile_repository.find_by_id(user_id)
        if existing:
            return existing

        with logfire.span("profile_service.ensure_profile", user_id=str(user_id)):
            max_length = self.settings.username_max_length
            username = username_from_email(email, max_length)
            if await self.profile_repository.find_by_username(username):
                suffix = user_id.hex[:6]
                username = f"{username[: max_length - len(suffix) - 1]}-{suffix}"

            return await self.profile_repository.insert_if_absent(
                Profile(id=user_id, username=username)
            )

    async def get_profile(self, username: str) -> Profile:
        """Get a profile by username.

        Raises:
            NotFoundError: If no user has this username
        """
        profile = await self.profile_repository.find_by_username(username)
        if not profile:
            raise NotFoundError("Profile", username)
        return profile

    async def update_profile(
        self,
        user_id: UserId,
        email: str | None = None,
        username: str | None = None,
        bio: str | None = None,
        avatar_url: str | None = None,
    ) -> Profile:
        """Edit the user's own profile.

        Fields left as None are unchanged. An empty bio or avatar URL clears
        it. Karma cannot be edited.

        Args:
            user_id: Authenticated user
            email: The user's email, used if the profile must be created first
            username: New username (3-30 characters, unique)
            bio: New bio (at most 500 characters)
            avatar_url: New avatar URL (http or https)

        Returns:
            The updated profile

        Raises:
            ValidationError: If any field is invalid or the username is taken
        """
        with logfire.span("profile_service.update_profile", user_id=str(user_id)):
            profile = await self.ensure_profile(user_id, email)
            changes: dict = {}

            if username is not None:
                username = username.strip()
                if not (
                    self.settings.username_min_length
                    <= len(username)
                    <= self.settings.username_max_length
                ):
                    raise ValidationError(
                        f"Username must be {self.settings.username_min_length}-"
                        f"{self.settings.username_max_length} characters"
                    )
                owner = await self.profile_repository.find_by_username(username)
                if owner and owner.id != user_id:
                    logfire.info("Username taken", username=username)
                    raise ValidationError("Username is already taken")
                changes["username"] = username

            if bio is not None:
                bio = bio.strip()
                if len(bio) > self.settings.bio_max_length:
                    raise ValidationError(
                        f"Bio must be at most {self.settings.bio_max_length} characters"
                    )
                changes["bio"] = bio or None

            if avatar_url is not None:
                avatar_url = avatar_url.strip()
                if avatar_url and not is_http_url(avatar_url):
                    raise ValidationError("Please enter a valid avatar URL")
                changes["avatar_url"] = avatar_url or None

            if not changes:
                return profile

            saved = await self.profile_repository.save(
                profile.model_copy(update={**changes, "updated_at": utcnow()})
            )
            logfire.info(
                "Profile updated", user_id=str(user_id), fields=sorted(changes)
            )
            return saved

    async def get_activity(
        self, profile: Profile, now: datetime | None = None
    ) -> ProfileActivity:
        """Collect a user's postings and recent comments.

        Postings carry vote and comment counts and are listed newest first,
        whatever their status. Comments are the most recent few, each with
        the title of the job it was written on.
        """
        now = now or utcnow()
        with logfire.span("profile_service.get_activity", user_id=str(profile.id)):
            jobs = await self.job_repository.find_by_owner(profile.id)
            postings = await self.ranking_service.annotate(jobs, now)

            comments = await self.comment_repository.find_by_author(
                profile.id, self.settings.recent_comments
            )
            total_comments = await self.comment_repository.count_by_author(profile.id)

            commented = await self.job_repository.find_by_ids(
                list({c.job_id for c in comments})
            )

            return ProfileActivity(
                postings=postings,
                recent_comments=comments,
                job_titles={job.id: job.title for job in commented},
                total_jobs=len(jobs),
                total_comments=total_comments,
            )
