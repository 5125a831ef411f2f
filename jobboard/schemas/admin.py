from pydantic import BaseModel


class AdminStatsResponse(BaseModel):
    """System-wide row counts"""
    users: int
    jobs: int
    companies: int
    applications: int


class MessageResponse(BaseModel):
    message: str
