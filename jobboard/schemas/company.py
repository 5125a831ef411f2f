"""
Pydantic schemas for companies.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

from jobboard.schemas.user import UserBrief


class CompanyCreateRequest(BaseModel):
    """Schema for creating a company"""
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    logo: Optional[str] = None


class CompanyUpdateRequest(BaseModel):
    """Schema for a partial company update"""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    logo: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def reject_null_name(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v


class CompanyResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    logo: Optional[str] = None
    employer_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CompanyDetailResponse(CompanyResponse):
    employer: Optional[UserBrief] = None


class CompanyListItem(BaseModel):
    """Public company card"""
    id: int
    name: str
    logo: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None

    class Config:
        from_attributes = True


class CompanyBrief(BaseModel):
    """Company attached to a job listing"""
    id: int
    name: str
    logo: Optional[str] = None
    location: Optional[str] = None

    class Config:
        from_attributes = True
