"""Company repository."""


from app.domain.company import Company
from app.repositories.base import BaseRepository


class CompanyRepository(BaseRepository[Company]):
    model = Company
    default_order_by = "name"
