"""Pydantic schemas package.

Folder intent:
  common.py    — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  company.py   — Company create/update DTOs and CompanyOut (shaped on reads)
  employee.py  — Employee create/update DTOs and EmployeeOut (shaped on reads)
"""
