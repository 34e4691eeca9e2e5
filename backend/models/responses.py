from pydantic import BaseModel

from models.schemas import RewriteResume


class HealthResponse(BaseModel):
    status: str = "ok"
    narrative_source: str = "none"


class RewriteResponse(BaseModel):
    rewrite: RewriteResume
