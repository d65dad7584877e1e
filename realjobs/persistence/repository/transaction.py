"""SQLAlchemy session-backed transaction."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from realjobs.domain.repository import Transaction


class SessionTransaction(Transaction):
    """Commits the request's SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        """Commit the session; later writes open a new transaction."""
        await self.session.commit()
        logfire.debug("Session committed early")
