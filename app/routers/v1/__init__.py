"""v1 router package — all /api/v1/* endpoints live here.

Files:
  companies.py  — /companies, /companies/collection/(ids)
  employees.py  — /companies/{company_id}/employees

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to app/services/.
"""
