"""Domain layer DI providers."""

from dishka import Scope, provide

from realjobs.config import (
    AuthSettings,
    CommentSettings,
    ProfileSettings,
    RankingSettings,
    SentimentSettings,
    TrustSettings,
    VotingSettings,
)
from realjobs.domain.repository import (
    BookmarkRepository,
    CommentRepository,
    CommentVoteRepository,
    JobRepository,
    ProfileRepository,
    VoteRepository,
)
from realjobs.domain.service import (
    AuthService,
    BookmarkService,
    CommentService,
    JobService,
    ModerationService,
    ProfileService,
    RankingService,
    SentimentClassifier,
    TrustService,
    VoteService,
)
from realjobs.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_auth_service(self, auth_settings: AuthSettings) -> AuthService:
        """Provide token verification service (stateless)."""
        return AuthService(auth_settings=auth_settings)

    @provide
    def get_trust_service(
        self,
        job_repository: JobRepository,
        vote_repository: VoteRepository,
        trust_settings: TrustSettings,
    ) -> TrustService:
        """Provide trust score service."""
        return TrustService(
            job_repository=job_repository,
            vote_repository=vote_repository,
            trust_settings=trust_settings,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        comment_vote_repository: CommentVoteRepository,
        job_repository: JobRepository,
        comment_repository: CommentRepository,
        trust_service: TrustService,
        voting_settings: VotingSettings,
    ) -> VoteService:
        """Provide vote ledger service."""
        return VoteService(
            vote_repository=vote_repository,
            comment_vote_repository=comment_vote_repository,
            job_repository=job_repository,
            comment_repository=comment_repository,
            trust_service=trust_service,
            voting_settings=voting_settings,
        )

    @provide
    def get_ranking_service(
        self,
        job_repository: JobRepository,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
        trust_service: TrustService,
        ranking_settings: RankingSettings,
    ) -> RankingService:
        """Provide ranking service."""
        return RankingService(
            job_repository=job_repository,
            vote_repository=vote_repository,
            comment_repository=comment_repository,
            trust_service=trust_service,
            ranking_settings=ranking_settings,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, comment_settings=comment_settings
        )

    @provide
    def get_moderation_service(
        self,
        classifier: SentimentClassifier,
        vote_repository: VoteRepository,
        trust_service: TrustService,
        sentiment_settings: SentimentSettings,
    ) -> ModerationService:
        """Provide sentiment moderation service."""
        return ModerationService(
            classifier=classifier,
            vote_repository=vote_repository,
            trust_service=trust_service,
            sentiment_settings=sentiment_settings,
        )

    @provide
    def get_job_service(self, job_repository: JobRepository) -> JobService:
        """Provide job domain service."""
        return JobService(job_repository=job_repository)

    @provide
    def get_bookmark_service(
        self,
        bookmark_repository: BookmarkRepository,
        job_repository: JobRepository,
    ) -> BookmarkService:
        """Provide bookmark domain service."""
        return BookmarkService(
            bookmark_repository=bookmark_repository, job_repository=job_repository
        )

    @provide
    def get_profile_service(
        self,
        profile_repository: ProfileRepository,
        job_repository: JobRepository,
        comment_repository: CommentRepository,
        ranking_service: RankingService,
        profile_settings: ProfileSettings,
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(
            profile_repository=profile_repository,
            job_repository=job_repository,
            comment_repository=comment_repository,
            ranking_service=ranking_service,
            profile_settings=profile_settings,
        )
