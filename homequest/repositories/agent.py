"""
Agent repository.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from homequest.repositories.base import BaseRepository
from homequest.models.agent import Agent
from typing import Optional, List, Dict, Any
import logging

logger = logging.getLogger(__name__)


class AgentRepository(BaseRepository[Agent]):
    """Repository for agent profiles."""

    def __init__(self, db: AsyncSession):
        super().__init__(Agent, db)

    async def get_agent(self, agent_id: int) -> Optional[Agent]:
        return await self.get_by_id(agent_id)

    async def get_agents(self, limit: int = 10) -> List[Agent]:
        return await self.get_multi(limit=limit)

    async def create_agent(self, agent_data: Dict[str, Any]) -> Agent:
        agent = await self.create(agent_data)
        logger.info(f"Created agent: {agent.name} (ID: {agent.id})")
        return agent
