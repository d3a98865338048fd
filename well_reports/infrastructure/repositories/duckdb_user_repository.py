from typing import Optional

from ...domain.entities.user import User
from ...domain.repositories.user_repository import UserRepository
from ...shared.schema import UserSchema
from .duckdb_base import DuckDBRepository


class DuckDBUserRepository(DuckDBRepository, UserRepository):
    """DuckDB implementation of the credential store."""

    schema = UserSchema

    async def save(self, user: User) -> User:
        """Persist a new user."""
        params = [getattr(user, col) for col in UserSchema.get_column_names()]

        def _save(conn):
            conn.execute(UserSchema.get_sql_insert(), params)
            return user

        return await self._run("save", "Error registering user", _save)

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get the first stored user with this username, if any."""
        query = f"""
        SELECT {', '.join(UserSchema.get_column_names())}
        FROM users
        WHERE username = ?
        ORDER BY seq
        LIMIT 1
        """

        def _get(conn):
            return conn.execute(query, [username]).fetchone()

        row = await self._run("get_by_username", "Error logging in", _get)
        return User(**self._row_to_dict(row)) if row else None
