"""Unit tests for ProfileService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from realjobs.domain.error import NotFoundError, ValidationError
from realjobs.domain.model import Profile
from realjobs.domain.repository import (
    CommentRepository,
    JobRepository,
    ProfileRepository,
)
from realjobs.domain.service import ProfileService, username_from_email
from realjobs.domain.value import JobStatus, UserId
from tests.conftest import NOW, make_comment, make_job
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUsernameFromEmail:
    """Tests for username_from_email."""

    @pytest.mark.parametrize(
        ("email", "expected"),
        [
            ("alice@example.com", "alice"),
            ("@example.com", "user"),
            (None, "user"),
            ("a" * 40 + "@example.com", "a" * 30),
        ],
    )
    def test_local_part(self, email, expected):
        assert username_from_email(email) == expected


class TestEnsureProfile:
    """Tests for ProfileService.ensure_profile."""

    @pytest.mark.asyncio
    async def test_creates_profile_once(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())

        # Act
        first = await profile_service.ensure_profile(user_id, "alice@example.com")
        second = await profile_service.ensure_profile(user_id, "other@example.com")

        # Assert
        assert first.username == "alice"
        assert first.karma_points == 0
        assert second == first

    @pytest.mark.asyncio
    async def test_taken_username_gets_id_suffix(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        await profile_service.ensure_profile(UserId(uuid4()), "alice@example.com")
        user_id = UserId(uuid4())

        # Act
        profile = await profile_service.ensure_profile(user_id, "alice@other.org")

        # Assert
        assert profile.username == f"alice-{user_id.hex[:6]}"


class TestUpdateProfile:
    """Tests for ProfileService.update_profile."""

    @pytest.mark.asyncio
    async def test_updates_fields_and_keeps_karma(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)
        user_id = UserId(uuid4())
        await profile_repo.insert_if_absent(
            Profile(id=user_id, username="alice", karma_points=12)
        )

        # Act
        profile = await profile_service.update_profile(
            user_id,
            username=" alice_hires ",
            bio="Recruiting for platform teams",
            avatar_url="https://cdn.example.com/a.png",
        )

        # Assert
        assert profile.username == "alice_hires"
        assert profile.bio == "Recruiting for platform teams"
        assert profile.avatar_url == "https://cdn.example.com/a.png"
        assert profile.karma_points == 12
        assert (await profile_service.get_profile("alice_hires")).id == user_id

    @pytest.mark.asyncio
    async def test_empty_values_clear_bio_and_avatar(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())
        await profile_service.update_profile(
            user_id, "bob@example.com", bio="Hello", avatar_url="https://x.example/b.png"
        )

        # Act
        profile = await profile_service.update_profile(user_id, bio="", avatar_url="")

        # Assert
        assert profile.bio is None
        assert profile.avatar_url is None
        assert profile.username == "bob"

    @pytest.mark.asyncio
    async def test_creates_profile_for_new_user(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        profile = await profile_service.update_profile(
            UserId(uuid4()), "carol@example.com", bio="First edit"
        )

        assert (profile.username, profile.bio) == ("carol", "First edit")

    @pytest.mark.asyncio
    async def test_username_taken_by_someone_else(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        await profile_service.ensure_profile(UserId(uuid4()), "alice@example.com")
        user_id = UserId(uuid4())

        # Act / Assert
        with pytest.raises(ValidationError, match="already taken"):
            await profile_service.update_profile(
                user_id, "bob@example.com", username="alice"
            )

    @pytest.mark.asyncio
    async def test_keeping_own_username_is_allowed(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())
        await profile_service.ensure_profile(user_id, "alice@example.com")

        profile = await profile_service.update_profile(user_id, username="alice")

        assert profile.username == "alice"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("fields", "message"),
        [
            ({"username": "al"}, "3-30 characters"),
            ({"username": "a" * 31}, "3-30 characters"),
            ({"bio": "x" * 501}, "at most 500"),
            ({"avatar_url": "javascript:alert(1)"}, "valid avatar URL"),
        ],
    )
    async def test_invalid_fields_are_rejected(self, unit_env, fields, message):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(ValidationError, match=message):
            await profile_service.update_profile(
                UserId(uuid4()), "dave@example.com", **fields
            )


class TestGetProfile:
    """Tests for ProfileService.get_profile and get_activity."""

    @pytest.mark.asyncio
    async def test_unknown_username(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.get_profile("nobody")

    @pytest.mark.asyncio
    async def test_activity_lists_postings_and_recent_comments(self, unit_env):
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        job_repo = await unit_env.get(JobRepository)
        comment_repo = await unit_env.get(CommentRepository)
        profile = await profile_service.ensure_profile(
            UserId(uuid4()), "erin@example.com"
        )
        older = await job_repo.save(
            make_job(owner_id=profile.id, age=timedelta(days=2), status=JobStatus.FILLED)
        )
        newer = await job_repo.save(make_job(owner_id=profile.id))
        elsewhere = await job_repo.save(make_job(title="Site Reliability Engineer"))
        limit = profile_service.settings.recent_comments
        for minutes in range(limit + 2):
            await comment_repo.save(
                make_comment(
                    elsewhere.id,
                    author_id=profile.id,
                    created_at=NOW - timedelta(minutes=minutes),
                )
            )

        # Act
        activity = await profile_service.get_activity(profile, NOW)

        # Assert
        assert [item.job.id for item in activity.postings] == [newer.id, older.id]
        assert activity.total_jobs == 2
        assert len(activity.recent_comments) == limit
        assert activity.recent_comments[0].created_at == NOW
        assert activity.total_comments == limit + 2
        assert activity.job_titles == {elsewhere.id: "Site Reliability Engineer"}
