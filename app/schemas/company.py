"""Company Pydantic schemas (request DTOs and response models)."""


from pydantic import Field

from app.schemas.common import CamelModel
from app.schemas.employee import EmployeeCreate

class CompanyManipulation(CamelModel):
    name: str = Field(min_length=1, max_length=60)
    address: str = Field(min_length=1, max_length=60)
    country: str | None = Field(default=None, max_length=60)
    employees: list[EmployeeCreate] = Field(default_factory=list)

class CompanyCreate(CompanyManipulation):
    pass

class CompanyUpdate(CompanyManipulation):
    pass

class CompanyOut(CamelModel):
    id: str
    name: str
    full_address: str
