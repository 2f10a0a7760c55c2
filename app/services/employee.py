"""Employee service — company-scoped employee reads and writes."""


import logging

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import BadRequestError, NotFoundError, ValidationError
from app.core.json_patch import PatchOperation, apply_patch
from app.core.pagination import EmployeeParameters, PagedList
from app.domain.employee import Employee
from app.repositories.company import CompanyRepository
from app.repositories.employee import EmployeeRepository
from app.schemas.employee import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)


def _describe(exc: PydanticValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )


class EmployeeService:
    def __init__(self, session: AsyncSession):
        self._repo = EmployeeRepository(session)
        self._companies = CompanyRepository(session)

    async def _ensure_company(self, company_id: str) -> None:
        if not await self._companies.get_by_id(company_id):
            logger.info("Company with id %s doesn't exist in the database.", company_id)
            raise NotFoundError("Company", company_id)

    async def get_employees(
        self, company_id: str, parameters: EmployeeParameters
    ) -> PagedList[Employee]:
        if not parameters.valid_age_range:
            logger.info("Rejected age range %s..%s", parameters.min_age, parameters.max_age)
            raise BadRequestError("Max age should be greater than min age.")
        await self._ensure_company(company_id)
        return await self._repo.get_employees(company_id, parameters)

    async def get_employee(self, company_id: str, employee_id: str) -> Employee:
        await self._ensure_company(company_id)
        employee = await self._repo.get_employee(company_id, employee_id)
        if not employee:
            logger.info("Employee with id %s doesn't exist in the database.", employee_id)
            raise NotFoundError("Employee", employee_id)
        return employee

    async def create_employee(self, company_id: str, data: EmployeeCreate) -> Employee:
        await self._ensure_company(company_id)
        return await self._repo.create(company_id=company_id, **data.model_dump())

    async def update_employee(
        self, company_id: str, employee_id: str, data: EmployeeUpdate
    ) -> Employee:
        _ = await self.get_employee(company_id, employee_id)  # raises 404 if missing
        updated = await self._repo.update(employee_id, **data.model_dump())
        return updated  # type: ignore[return-value]

    async def patch_employee(
        self, company_id: str, employee_id: str, operations: list[PatchOperation]
    ) -> Employee:
        """Apply a JSON Patch to the employee's update DTO, re-validate, then save."""
        employee = await self.get_employee(company_id, employee_id)
        document = EmployeeUpdate.model_validate(employee).model_dump(by_alias=True)
        patched = apply_patch(document, operations)
        try:
            data = EmployeeUpdate.model_validate(patched)
        except PydanticValidationError as exc:
            logger.error("Invalid model state for the patch document: %s", _describe(exc))
            raise ValidationError(_describe(exc)) from exc
        return await self.update_employee(company_id, employee_id, data)

    async def delete_employee(self, company_id: str, employee_id: str) -> None:
        _ = await self.get_employee(company_id, employee_id)  # raises 404 if missing
        await self._repo.soft_delete(employee_id)
