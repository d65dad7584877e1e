"""Authenticated user."""

from realjobs.domain.model.common import DomainModel
from realjobs.domain.value import UserId


class CurrentUser(DomainModel):
    """User resolved from a verified auth token.

    Credentials live with the external auth provider. The public side of a
    user is their Profile.
    """

    id: UserId
    email: str | None = None
