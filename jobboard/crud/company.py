"""
CRUD operations for Company model.
"""

from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from jobboard.models.company import Company
from jobboard.schemas.company import CompanyCreateRequest, CompanyUpdateRequest


def create(db: Session, company_data: CompanyCreateRequest, employer_id: int) -> Company:
    db_company = Company(**company_data.model_dump(), employer_id=employer_id)

    db.add(db_company)
    db.commit()
    db.refresh(db_company)

    return db_company


def get_by_id(db: Session, company_id: int) -> Optional[Company]:
    return (
        db.query(Company)
        .options(joinedload(Company.employer))
        .filter(Company.id == company_id)
        .first()
    )


def get_owned(db: Session, company_id: int, employer_id: int) -> Optional[Company]:
    """Return the company only if it belongs to the given employer."""
    return (
        db.query(Company)
        .filter(Company.id == company_id, Company.employer_id == employer_id)
        .first()
    )


def get_by_employer(db: Session, employer_id: int) -> List[Company]:
    return (
        db.query(Company)
        .filter(Company.employer_id == employer_id)
        .order_by(Company.created_at.desc(), Company.id.desc())
        .all()
    )


def get_recent(db: Session, limit: int = 10) -> List[Company]:
    """Most recently created companies, for the public landing page."""
    return (
        db.query(Company)
        .order_by(Company.created_at.desc(), Company.id.desc())
        .limit(limit)
        .all()
    )


def update(db: Session, company: Company, update: CompanyUpdateRequest) -> Company:
    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(company, field, value)

    db.commit()
    db.refresh(company)

    return company


def count(db: Session) -> int:
    return db.query(Company).count()
