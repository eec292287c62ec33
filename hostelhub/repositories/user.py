"""
User Repository

Provides database operations for User model.
"""

from datetime import UTC, datetime

from sqlalchemy import select

from hostelhub.models.orm.user import User
from hostelhub.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model operations."""

    model = User

    async def get_by_uid(self, uid: str) -> User | None:
        """
        Get user by Google account id.

        Args:
            uid: Google subject identifier

        Returns:
            User or None if not found
        """
        result = await self.session.execute(select(User).where(User.uid == uid))
        return result.scalar_one_or_none()

    async def upsert_from_google(
        self,
        uid: str,
        name: str | None,
        email: str | None,
        profile_picture: str | None,
    ) -> User:
        """
        Find or create the user for a Google sign-in.

        Profile fields are only written on first sign-in; every sign-in
        updates last_login.

        Returns:
            The existing or newly created user
        """
        user = await self.get_by_uid(uid)
        now = datetime.now(UTC)

        if user is None:
            user = User(
                uid=uid,
                name=name,
                email=email,
                profile_picture=profile_picture,
                last_login=now,
            )
            return await self.create(user)

        user.last_login = now
        return await self.update(user)
