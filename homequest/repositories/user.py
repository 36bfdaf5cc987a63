"""
User repository for account lookups, registration and profile updates.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from homequest.repositories.base import BaseRepository
from homequest.models.user import User, UserRole
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)

# Fields a profile update may touch; the password is never among them
UPDATABLE_FIELDS = ("name", "email", "phone", "profile_image")


class UserRepository(BaseRepository[User]):
    """
    Repository for user accounts.
    Plaintext passwords are hashed here and never persisted as given.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def get_user(self, user_id: int) -> Optional[User]:
        return await self.get_by_id(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username.

        Args:
            username: Exact username to look up

        Returns:
            User instance if found, None otherwise
        """
        return await self.get_by_field("username", username)

    async def create_user(self, user_data: Dict[str, Any]) -> User:
        """
        Create a new user, hashing the plaintext password.

        Args:
            user_data: Dictionary containing user information
                      Must include: username, password
                      Optional: email, name, phone, role (defaults to USER)

        Returns:
            Created user instance

        Raises:
            ValueError: If the password is missing or empty
            Exception: If database operation fails
        """
        try:
            data = dict(user_data)
            password = data.pop("password", None)
            if not password:
                raise ValueError("Password is required")

            create_data = {
                **data,
                "hashed_password": User.hash_password(password),
                "role": data.get("role") or UserRole.USER,
            }

            created_user = await self.create(create_data)
            logger.info(f"Created user: {created_user.username} (ID: {created_user.id})")
            return created_user
        except ValueError as e:
            logger.error(f"User validation failed: {e}")
            raise
        except Exception as e:
            logger.error(f"Failed to create user: {e}")
            raise

    async def update_user(self, user_id: int, updates: Dict[str, Any]) -> Optional[User]:
        """
        Apply a partial profile update.

        Args:
            user_id: ID of the user to update
            updates: Field values; keys outside the profile fields are ignored

        Returns:
            Updated user, or None if the user does not exist
        """
        profile_data = {k: v for k, v in updates.items() if k in UPDATABLE_FIELDS}
        user = await self.update(user_id, profile_data)
        if user:
            logger.info(f"Updated profile of user {user.username} (ID: {user_id})")
        return user
