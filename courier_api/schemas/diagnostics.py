from courier_api.schemas.common import CamelModel

class ConnectionInfo(CamelModel):
    success: bool = True
    dialect: str

class TableInfo(CamelModel):
    name: str
    row_count: int | None = None

class DatabaseCheckResponse(CamelModel):
    """Diagnostic payload of GET /test-db."""
    success: bool = True
    connection: ConnectionInfo
    tables: list[TableInfo]
    message: str

class HealthResponse(CamelModel):
    """Liveness payload of /health; never touches the database."""
    status: str = "ok"
    app: str
    env: str
    version: str
