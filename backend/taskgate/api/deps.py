"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from taskgate.core.config import settings
from taskgate.db.session import get_db as _get_db
from taskgate.validation.pipeline import ValidationPipeline


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session."""
    async for session in _get_db():
        yield session


def get_pipeline(request: Request) -> ValidationPipeline:
    """The process-wide pipeline built in the app lifespan."""
    return request.app.state.pipeline


async def get_agent_id(
    x_agent_id: str | None = Header(default=None, alias="X-Agent-Id"),
) -> str:
    """Calling agent id, set by the upstream auth gateway."""
    if not x_agent_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return x_agent_id


async def require_admin(agent_id: str = Depends(get_agent_id)) -> str:
    """Allow only agent ids listed in ADMIN_AGENT_IDS."""
    if agent_id not in settings.admin_agent_ids:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return agent_id
