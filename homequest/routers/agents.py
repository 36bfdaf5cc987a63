"""
Agent API endpoints.
"""

from fastapi import APIRouter, Depends, status, Query, Path
from typing import List
import logging

from homequest.repositories.agent import AgentRepository
from homequest.schemas.agent import AgentResponse
from homequest.schemas.error import get_error_responses
from homequest.utils.dependencies import get_agent_repository
from homequest.utils.exceptions import APIException, NotFoundError, InternalServerError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/agents", tags=["Agents"])


@router.get(
    "",
    response_model=List[AgentResponse],
    status_code=status.HTTP_200_OK,
    summary="List agents",
    responses=get_error_responses(400, 500)
)
async def get_agents(
    limit: int = Query(10, ge=1, description="Maximum number of agents"),
    agent_repo: AgentRepository = Depends(get_agent_repository)
) -> List[AgentResponse]:
    try:
        return await agent_repo.get_agents(limit)
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error fetching agents: {e}")
        raise InternalServerError("Failed to fetch agents")


@router.get(
    "/{agent_id}",
    response_model=AgentResponse,
    status_code=status.HTTP_200_OK,
    summary="Get agent details",
    responses=get_error_responses(400, 404, 500)
)
async def get_agent(
    agent_id: int = Path(..., description="Agent ID"),
    agent_repo: AgentRepository = Depends(get_agent_repository)
) -> AgentResponse:
    try:
        agent = await agent_repo.get_agent(agent_id)
        if not agent:
            raise NotFoundError("Agent")
        return agent
    except APIException:
        raise
    except Exception as e:
        logger.error(f"Error fetching agent {agent_id}: {e}")
        raise InternalServerError("Failed to fetch agent")
