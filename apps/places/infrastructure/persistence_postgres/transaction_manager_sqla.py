"""SQLAlchemy Transaction Manager for places writes."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class SqlaTransactionManager:
    """요청 세션 단위 트랜잭션 관리자.

    commit이 실패하면 세션을 롤백한 뒤 원래 예외를 그대로 전파합니다.
    열린 트랜잭션이 없으면 rollback은 아무 것도 하지 않습니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except SQLAlchemyError:
            logger.warning("Places transaction commit failed; rolling back", exc_info=True)
            await self._session.rollback()
            raise

    async def rollback(self) -> None:
        if not self._session.in_transaction():
            return
        await self._session.rollback()
        logger.info("Places transaction rolled back")
