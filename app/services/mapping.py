"""Entity → DTO mapping.

Kept apart from the services so routers and services agree on one
representation of each resource.
"""


from collections.abc import Iterable

from app.domain.company import Company
from app.domain.employee import Employee
from app.schemas.company import CompanyOut
from app.schemas.employee import EmployeeOut


def to_company_dto(company: Company) -> CompanyOut:
    full_address = " ".join(part for part in (company.address, company.country) if part)
    return CompanyOut(id=company.id, name=company.name, full_address=full_address)


def to_company_dtos(companies: Iterable[Company]) -> list[CompanyOut]:
    return [to_company_dto(c) for c in companies]


def to_employee_dto(employee: Employee) -> EmployeeOut:
    return EmployeeOut.model_validate(employee)
