"""Employee Pydantic schemas (request DTOs and response models)."""


from pydantic import Field

from app.schemas.common import CamelModel

class EmployeeManipulation(CamelModel):
    name: str = Field(min_length=1, max_length=30)
    age: int = Field(ge=18)
    position: str = Field(min_length=1, max_length=20)

class EmployeeCreate(EmployeeManipulation):
    pass

class EmployeeUpdate(EmployeeManipulation):
    pass

class EmployeeOut(CamelModel):
    id: str
    name: str
    age: int
    position: str
