"""Core DI providers (non-mockable)."""

import logfire
from dishka import Scope, provide

from commenttree.config import CommentSettings, RetrySettings, Settings
from commenttree.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and logging handles shared for the whole process.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment service limits."""
        return settings.comments

    @provide
    def provide_retry_settings(self, settings: Settings) -> RetrySettings:
        """Provide storage retry policy."""
        return settings.retry

    @provide
    def provide_logfire(self) -> logfire.Logfire:
        """Provide a Logfire handle tagged for comment operations."""
        return logfire.with_settings(tags=["comments"])
