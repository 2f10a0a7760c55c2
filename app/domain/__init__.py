"""Domain package — all ORM models are imported here so create_all sees them.

Folder intent:
  company.py   — Company (owns employees)
  employee.py  — Employee rows, filtered/sorted/paged by the employees list endpoint
  mixins.py    — Shared UUIDPrimaryKeyMixin, TimestampMixin
"""

from app.domain.company import Company
from app.domain.employee import Employee

__all__ = [
    "Company",
    "Employee",
]
