"""Application layer DI providers."""

from dishka import Scope, provide

from realjobs.application.usecase.auth import GetCurrentUserUseCase
from realjobs.application.usecase.bookmark import (
    ListBookmarksUseCase,
    ToggleBookmarkUseCase,
)
from realjobs.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
)
from realjobs.application.usecase.job import (
    CreateJobUseCase,
    GetJobUseCase,
    ListJobsUseCase,
    UpdateJobStatusUseCase,
)
from realjobs.application.usecase.user import (
    GetUserProfileUseCase,
    UpdateUserProfileUseCase,
)
from realjobs.application.usecase.vote import (
    CastCommentVoteUseCase,
    CastJobVoteUseCase,
)
from realjobs.domain.repository import Transaction
from realjobs.domain.service import (
    AuthService,
    BookmarkService,
    CommentNotifier,
    CommentService,
    JobService,
    ModerationService,
    ProfileService,
    RankingService,
    VoteService,
)
from realjobs.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_current_user_use_case(
        self, auth_service: AuthService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(auth_service=auth_service)

    # Job use cases
    @provide
    def get_list_jobs_use_case(
        self, ranking_service: RankingService, vote_service: VoteService
    ) -> ListJobsUseCase:
        """Provide list jobs use case."""
        return ListJobsUseCase(
            ranking_service=ranking_service, vote_service=vote_service
        )

    @provide
    def get_create_job_use_case(
        self, job_service: JobService, profile_service: ProfileService
    ) -> CreateJobUseCase:
        """Provide create job use case."""
        return CreateJobUseCase(
            job_service=job_service, profile_service=profile_service
        )

    @provide
    def get_get_job_use_case(
        self,
        job_service: JobService,
        ranking_service: RankingService,
        vote_service: VoteService,
        bookmark_service: BookmarkService,
    ) -> GetJobUseCase:
        """Provide get job use case."""
        return GetJobUseCase(
            job_service=job_service,
            ranking_service=ranking_service,
            vote_service=vote_service,
            bookmark_service=bookmark_service,
        )

    @provide
    def get_update_job_status_use_case(
        self, job_service: JobService
    ) -> UpdateJobStatusUseCase:
        """Provide update job status use case."""
        return UpdateJobStatusUseCase(job_service=job_service)

    # Vote use cases
    @provide
    def get_cast_job_vote_use_case(
        self, vote_service: VoteService
    ) -> CastJobVoteUseCase:
        """Provide cast job vote use case."""
        return CastJobVoteUseCase(vote_service=vote_service)

    @provide
    def get_cast_comment_vote_use_case(
        self, vote_service: VoteService
    ) -> CastCommentVoteUseCase:
        """Provide cast comment vote use case."""
        return CastCommentVoteUseCase(vote_service=vote_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        job_service: JobService,
        moderation_service: ModerationService,
        comment_notifier: CommentNotifier,
        transaction: Transaction,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            job_service=job_service,
            moderation_service=moderation_service,
            comment_notifier=comment_notifier,
            transaction=transaction,
        )

    @provide
    def get_comments_use_case(
        self, comment_service: CommentService, vote_service: VoteService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, vote_service=vote_service
        )

    # Bookmark use cases
    @provide
    def get_toggle_bookmark_use_case(
        self, bookmark_service: BookmarkService
    ) -> ToggleBookmarkUseCase:
        """Provide toggle bookmark use case."""
        return ToggleBookmarkUseCase(bookmark_service=bookmark_service)

    @provide
    def get_list_bookmarks_use_case(
        self,
        bookmark_service: BookmarkService,
        job_service: JobService,
        ranking_service: RankingService,
    ) -> ListBookmarksUseCase:
        """Provide list bookmarks use case."""
        return ListBookmarksUseCase(
            bookmark_service=bookmark_service,
            job_service=job_service,
            ranking_service=ranking_service,
        )

    # Profile use cases
    @provide
    def get_user_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(profile_service=profile_service)

    @provide
    def get_update_user_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(profile_service=profile_service)
