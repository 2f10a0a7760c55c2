"""Services package — all business logic lives here, never in routers.

Files:
  company.py   — CompanyService (lookups, bulk create, in-memory sorted paging)
  employee.py  — EmployeeService (age-filtered paging, JSON Patch updates)
  mapping.py   — entity → DTO mapping shared by routers

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
