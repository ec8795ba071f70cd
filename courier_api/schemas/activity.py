from courier_api.schemas.common import CamelModel

class HeartbeatRequest(CamelModel):
    token: str | None = None

class HeartbeatResponse(CamelModel):
    success: bool = True
    active_users: int

class ActivitySummary(CamelModel):
    success: bool = True
    active_users: int
    total_sessions: int
