# Services package init
"""
Employee Directory Backend: Services Layer
===========================================

What:  Business logic between routes (HTTP) and the database.

Service Inventory:
    - store.EntityStore:          table-level reads and writes, one session per call
    - resolver:                   join-table traversal (employee ↔ department/role)
    - employee_service:           detail composition, listings, create/update/delete
    - seed_service:               schema reset and demo data for /seed_db

Services never build HTTP responses; routes translate their results and
exceptions into status codes.
"""
