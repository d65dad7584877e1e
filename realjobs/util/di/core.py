"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from realjobs.config import (
    AuthSettings,
    CommentSettings,
    ProfileSettings,
    RankingSettings,
    SentimentSettings,
    Settings,
    TrustSettings,
    VotingSettings,
)
from realjobs.util.di.base import ProviderBase
from realjobs.util.error import ConfigurationError

DEFAULT_JWT_SECRET = AuthSettings().jwt_secret


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment.

        Raises:
            ConfigurationError: If production runs with the placeholder JWT secret
        """
        settings = Settings()
        if (
            settings.environment == "production"
            and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
        ):
            raise ConfigurationError(
                "AUTH__JWT_SECRET", "must be set in production"
            )
        return settings

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide
    def provide_sentiment_settings(self, settings: Settings) -> SentimentSettings:
        """Provide sentiment classifier settings."""
        return settings.sentiment

    @provide
    def provide_ranking_settings(self, settings: Settings) -> RankingSettings:
        """Provide ranking settings."""
        return settings.ranking

    @provide
    def provide_trust_settings(self, settings: Settings) -> TrustSettings:
        """Provide trust badge thresholds."""
        return settings.trust

    @provide
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment limits."""
        return settings.comments

    @provide
    def provide_voting_settings(self, settings: Settings) -> VotingSettings:
        """Provide vote ledger settings."""
        return settings.voting

    @provide
    def provide_profile_settings(self, settings: Settings) -> ProfileSettings:
        """Provide profile limits."""
        return settings.profiles
