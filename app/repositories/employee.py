"""Employee repository — every query is scoped to the owning company."""


from app.core.pagination import EmployeeParameters, PagedList
from app.domain.employee import Employee
from app.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[Employee]):
    model = Employee
    default_order_by = "name"

    async def get_employees(
        self, company_id: str, parameters: EmployeeParameters
    ) -> PagedList[Employee]:
        """One page of a company's employees within the inclusive age bounds."""
        criteria = [Employee.company_id == company_id, Employee.age >= parameters.min_age]
        if parameters.max_age is not None:
            criteria.append(Employee.age <= parameters.max_age)
        return await self.paged(self.find_by_condition(*criteria), parameters)

    async def get_employee(self, company_id: str, employee_id: str) -> Employee | None:
        result = await self._session.execute(
            self.find_by_condition(
                Employee.company_id == company_id,
                Employee.id == employee_id,
            )
        )
        return result.scalars().first()
