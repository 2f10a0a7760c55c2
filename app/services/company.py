"""Company service — company lookups, creation (with nested employees) and paging.

Rule: No FastAPI here. Routers map entities to DTOs and shape them.
"""


import logging
from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import BadRequestError, NotFoundError
from app.core.pagination import PagedList, RequestParameters
from app.core.sorting import build_ordering, sort_records
from app.domain.company import Company
from app.repositories.company import CompanyRepository
from app.repositories.employee import EmployeeRepository
from app.schemas.company import CompanyCreate, CompanyUpdate

logger = logging.getLogger(__name__)

class CompanyService:
    def __init__(self, session: AsyncSession):
        self._repo = CompanyRepository(session)
        self._employees = EmployeeRepository(session)

    async def list_companies(self, parameters: RequestParameters) -> PagedList[Company]:
        """All companies, ordered and windowed in memory (the table is small)."""
        companies = await self._repo.list_all()
        spec = build_ordering(Company, parameters.order_by, CompanyRepository.default_order_by)
        ordered = sort_records(companies, spec)
        return PagedList.from_sequence(ordered, parameters.page_number, parameters.page_size)

    async def get_company(self, company_id: str) -> Company:
        company = await self._repo.get_by_id(company_id)
        if not company:
            logger.info("Company with id %s doesn't exist in the database.", company_id)
            raise NotFoundError("Company", company_id)
        return company

    async def get_companies(self, ids: Sequence[str]) -> list[Company]:
        """Companies in the order *ids* lists them; every id must exist."""
        if not ids:
            logger.error("Parameter ids is empty")
            raise BadRequestError("Parameter ids is empty")

        found = {c.id: c for c in await self._repo.get_by_ids(ids)}
        missing = [i for i in ids if i not in found]
        if missing:
            logger.error("Some ids are not valid in a collection: %s", ", ".join(missing))
            raise NotFoundError("Companies", ", ".join(missing))
        return [found[i] for i in ids]

    async def create_company(self, data: CompanyCreate) -> Company:
        company = await self._repo.create(**data.model_dump(exclude={"employees"}))
        await self._add_employees(company.id, data)
        return company

    async def create_companies(self, items: Sequence[CompanyCreate]) -> list[Company]:
        if not items:
            logger.error("Company collection sent from client is empty.")
            raise BadRequestError("Company collection is empty")
        return [await self.create_company(item) for item in items]

    async def update_company(self, company_id: str, data: CompanyUpdate) -> Company:
        _ = await self.get_company(company_id)  # raises 404 if missing
        updated = await self._repo.update(company_id, **data.model_dump(exclude={"employees"}))
        await self._add_employees(company_id, data)
        return updated  # type: ignore[return-value]

    async def delete_company(self, company_id: str) -> None:
        deleted = await self._repo.soft_delete(company_id)
        if not deleted:
            logger.info("Company with id %s doesn't exist in the database.", company_id)
            raise NotFoundError("Company", company_id)

    async def _add_employees(self, company_id: str, data: CompanyCreate | CompanyUpdate) -> None:
        for employee in data.employees:
            await self._employees.create(company_id=company_id, **employee.model_dump())
