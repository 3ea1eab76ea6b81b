from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    mode: str


class VersionResponse(BaseModel):
    version: str
    mode: str


class ErrorResponse(BaseModel):
    code: str
    message: str
    request_id: str
