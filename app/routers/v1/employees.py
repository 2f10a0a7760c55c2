"""Employee router — nested under a company.

GET on the collection runs the whole filter → sort → page → shape pipeline
and reports page metadata in the pagination header.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.data_shaping import DataShaper, ShapedEntity
from app.core.json_patch import PatchOperation
from app.core.pagination import EmployeeParameters
from app.core.response import set_pagination_header
from app.db.base import get_db
from app.schemas.common import ErrorResponse
from app.schemas.employee import EmployeeCreate, EmployeeOut, EmployeeUpdate
from app.services.employee import EmployeeService
from app.services.mapping import to_employee_dto

router = APIRouter(
    prefix="/companies/{company_id}/employees",
    tags=["Employees"],
    responses={404: {"model": ErrorResponse}},
)

_shaper = DataShaper(EmployeeOut)


@router.get("", response_model=list[ShapedEntity])
async def list_employees(
    company_id: str,
    response: Response,
    parameters: EmployeeParameters = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """List a company's employees. Filter by ?minAge / ?maxAge."""
    page = await EmployeeService(session).get_employees(company_id, parameters)
    set_pagination_header(response, page.meta)
    return _shaper.shape_data(page.map(to_employee_dto), parameters.fields)


@router.get("/{employee_id}", response_model=ShapedEntity)
async def get_employee(
    company_id: str,
    employee_id: str,
    fields: Optional[str] = Query(default=None, description="e.g. `name,age`"),
    session: AsyncSession = Depends(get_db),
):
    employee = await EmployeeService(session).get_employee(company_id, employee_id)
    return _shaper.shape_entity(to_employee_dto(employee), fields)


@router.post("", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
async def create_employee(
    company_id: str,
    body: EmployeeCreate,
    session: AsyncSession = Depends(get_db),
):
    employee = await EmployeeService(session).create_employee(company_id, body)
    return to_employee_dto(employee)


@router.put("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_employee(
    company_id: str,
    employee_id: str,
    body: EmployeeUpdate,
    session: AsyncSession = Depends(get_db),
):
    await EmployeeService(session).update_employee(company_id, employee_id, body)


@router.patch("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def patch_employee(
    company_id: str,
    employee_id: str,
    body: list[PatchOperation],
    session: AsyncSession = Depends(get_db),
):
    """Partially update an employee with a JSON Patch document."""
    await EmployeeService(session).patch_employee(company_id, employee_id, body)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    company_id: str,
    employee_id: str,
    session: AsyncSession = Depends(get_db),
):
    await EmployeeService(session).delete_employee(company_id, employee_id)
