"""SQL implementation of the User repository."""

from typing import List, Optional, Sequence

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from virtue.domain.model import User
from virtue.domain.repository import UserRepository
from virtue.domain.value import UserId
from virtue.persistence.mappers import row_to_user, user_to_dict
from virtue.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """Users keyed by local id, with unique external id and email."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _find_one(self, condition: ColumnElement[bool]) -> Optional[User]:
        result = await self.session.execute(select(users_table).where(condition))
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_external_id(self, external_id: str) -> Optional[User]:
        return await self._find_one(users_table.c.external_id == external_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self._find_one(users_table.c.email == email)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Batch lookup for feed authors; unknown ids are skipped."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(set(user_ids)))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings()]

    async def save(self, user: User) -> User:
        """Update the stored row for ``user.id``, inserting it if absent.

        Raises:
            sqlalchemy.exc.IntegrityError: If the external id or email
                already belongs to another user
        """
        values = user_to_dict(user)
        result = await self.session.execute(
            users_table.update().where(users_table.c.id == user.id).values(**values)
        )
        if result.rowcount == 0:
            await self.session.execute(users_table.insert().values(**values))

        await self.session.flush()
        return user
