"""Company router — paged/sorted/shaped reads plus create, update and delete."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.data_shaping import DataShaper, ShapedEntity
from app.core.pagination import RequestParameters
from app.core.response import set_pagination_header
from app.db.base import get_db
from app.schemas.common import ErrorResponse
from app.schemas.company import CompanyCreate, CompanyOut, CompanyUpdate
from app.services.company import CompanyService
from app.services.mapping import to_company_dto, to_company_dtos

router = APIRouter(
    prefix="/companies",
    tags=["Companies"],
    responses={404: {"model": ErrorResponse}},
)

_shaper = DataShaper(CompanyOut)


def _parse_ids(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=list[ShapedEntity])
async def list_companies(
    response: Response,
    parameters: RequestParameters = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """List companies. Supports ?pageNumber, ?pageSize, ?orderBy=name desc and ?fields=id,name."""
    page = await CompanyService(session).list_companies(parameters)
    set_pagination_header(response, page.meta)
    return _shaper.shape_data(page.map(to_company_dto), parameters.fields)


@router.get("/collection/({ids:path})", response_model=list[CompanyOut])
async def get_company_collection(
    ids: str,
    session: AsyncSession = Depends(get_db),
):
    """Fetch several companies by comma-separated id, in the order given."""
    companies = await CompanyService(session).get_companies(_parse_ids(ids))
    return to_company_dtos(companies)


@router.post("/collection", response_model=list[CompanyOut], status_code=status.HTTP_201_CREATED)
async def create_company_collection(
    body: list[CompanyCreate],
    session: AsyncSession = Depends(get_db),
):
    companies = await CompanyService(session).create_companies(body)
    return to_company_dtos(companies)


@router.get("/{company_id}", response_model=ShapedEntity)
async def get_company(
    company_id: str,
    fields: Optional[str] = Query(default=None, description="e.g. `name,fullAddress`"),
    session: AsyncSession = Depends(get_db),
):
    company = await CompanyService(session).get_company(company_id)
    return _shaper.shape_entity(to_company_dto(company), fields)


@router.post("", response_model=CompanyOut, status_code=status.HTTP_201_CREATED)
async def create_company(
    body: CompanyCreate,
    session: AsyncSession = Depends(get_db),
):
    """Create a company, optionally with its first employees."""
    company = await CompanyService(session).create_company(body)
    return to_company_dto(company)


@router.put("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_company(
    company_id: str,
    body: CompanyUpdate,
    session: AsyncSession = Depends(get_db),
):
    await CompanyService(session).update_company(company_id, body)


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_company(
    company_id: str,
    session: AsyncSession = Depends(get_db),
):
    await CompanyService(session).delete_company(company_id)
