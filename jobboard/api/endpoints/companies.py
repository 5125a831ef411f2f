"""
Company endpoints.

Employers create and manage their companies; listing and detail are public.
"""

import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.deps import get_employer_user
from jobboard.crud import company as company_crud
from jobboard.models.user import User
from jobboard.schemas.company import (
    CompanyCreateRequest,
    CompanyDetailResponse,
    CompanyListItem,
    CompanyResponse,
    CompanyUpdateRequest,
)

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=CompanyResponse)
def create_company(
    request: CompanyCreateRequest,
    current_user: User = Depends(get_employer_user),
    db: Session = Depends(get_db)
):
    """Create a company owned by the current employer."""
    company = company_crud.create(db, request, employer_id=current_user.id)
    logger.info(f"Created company {company.id}: {company.name} (employer {current_user.id})")
    return company


@router.get("/my-companies", response_model=List[CompanyResponse])
def list_my_companies(
    current_user: User = Depends(get_employer_user),
    db: Session = Depends(get_db)
):
    return company_crud.get_by_employer(db, current_user.id)


@router.get("", response_model=List[CompanyListItem])
def list_companies(db: Session = Depends(get_db)):
    """The ten most recently created companies."""
    return company_crud.get_recent(db, limit=10)


@router.get("/{company_id}", response_model=CompanyDetailResponse)
def get_company(company_id: int, db: Session = Depends(get_db)):
    company = company_crud.get_by_id(db, company_id)
    if not company:
        raise HTTPException(status_code=404, detail="Company not found")
    return company


@router.put("/{company_id}", response_model=CompanyResponse)
def update_company(
    company_id: int,
    request: CompanyUpdateRequest,
    current_user: User = Depends(get_employer_user),
    db: Session = Depends(get_db)
):
    """Update a company owned by the current employer."""
    company = company_crud.get_by_id(db, company_id)
    if not company:
        raise HTTPException(status_code=404, detail="Company not found")

    if company.employer_id != current_user.id:
        logger.warning(f"Employer {current_user.id} tried to update company {company_id}")
        raise HTTPException(status_code=403, detail="Not authorized to update this company")

    company = company_crud.update(db, company, request)
    logger.info(f"Updated company {company_id}")
    return company
