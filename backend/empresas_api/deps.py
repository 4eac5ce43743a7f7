from fastapi import Depends
from sqlalchemy.orm import Session

from empresas_api.db import get_db
from empresas_api.repositories.company import CompanyRepository
from empresas_api.services.company import CompanyService

__all__ = ["get_db", "get_company_service"]


def get_company_service(db: Session = Depends(get_db)) -> CompanyService:
    return CompanyService(CompanyRepository(db))
