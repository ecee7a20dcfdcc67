"""Connection repository for database operations."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.connection import Connection, ConnectionStatus


class ConnectionRepository:
    """Repository for connection database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_entry(self, user_id: UUID, peer_id: UUID) -> Optional[Connection]:
        """Get ``user_id``'s entry for ``peer_id``."""
        stmt = (
            select(Connection)
            .where(and_(Connection.user_id == user_id, Connection.peer_id == peer_id))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create_request(self, requester_id: UUID, addressee_id: UUID) -> Connection:
        """Create the pending entry on both sides and return the requester's."""
        outgoing = Connection(
            user_id=requester_id,
            peer_id=addressee_id,
            status=ConnectionStatus.PENDING.value,
            is_requester=True,
        )
        incoming = Connection(
            user_id=addressee_id,
            peer_id=requester_id,
            status=ConnectionStatus.PENDING.value,
            is_requester=False,
        )
        self.session.add_all([outgoing, incoming])
        await self.session.commit()
        return await self.get_entry(requester_id, addressee_id)

    async def accept_request(self, addressee_id: UUID, requester_id: UUID) -> bool:
        """Flip a pending request to accepted on both sides.

        Returns False when ``addressee_id`` has no pending incoming request
        from ``requester_id``.
        """
        incoming = await self.get_entry(addressee_id, requester_id)
        if not incoming or not incoming.is_incoming_request:
            return False

        stmt = (
            update(Connection)
            .where(
                Connection.status == ConnectionStatus.PENDING.value,
                (
                    (Connection.user_id == addressee_id) & (Connection.peer_id == requester_id)
                ) | (
                    (Connection.user_id == requester_id) & (Connection.peer_id == addressee_id)
                ),
            )
            .values(status=ConnectionStatus.ACCEPTED.value)
        )
        await self.session.execute(stmt)
        await self.session.commit()
        return True

    async def list_for_user(
        self, user_id: UUID, status: Optional[ConnectionStatus] = None
    ) -> List[Connection]:
        """List a user's connection entries, newest first."""
        stmt = select(Connection).where(Connection.user_id == user_id)
        if status is not None:
            stmt = stmt.where(Connection.status == status.value)
        stmt = stmt.order_by(Connection.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def count_accepted(self, user_id: UUID) -> int:
        """Number of accepted connections for one user."""
        stmt = select(func.count(Connection.id)).where(
            Connection.user_id == user_id,
            Connection.status == ConnectionStatus.ACCEPTED.value,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
