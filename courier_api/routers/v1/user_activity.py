"""Session heartbeat router feeding the dashboard's active-user counter."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from courier_api.db.base import get_db
from courier_api.schemas.activity import ActivitySummary, HeartbeatRequest, HeartbeatResponse
from courier_api.services.activity import UserActivityService

router = APIRouter(prefix="/user-activity", tags=["User Activity"])


@router.post("", response_model=HeartbeatResponse)
async def record_activity(body: HeartbeatRequest, session: AsyncSession = Depends(get_db)):
    sessions = await UserActivityService(session).heartbeat(body.token)
    return HeartbeatResponse(active_users=sessions)


@router.get("", response_model=ActivitySummary)
async def activity_summary(session: AsyncSession = Depends(get_db)):
    users, sessions = await UserActivityService(session).summary()
    return ActivitySummary(active_users=users, total_sessions=sessions)
