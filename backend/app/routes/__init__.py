# Routes package init
"""
Employee Directory Backend: API Routes Package
===============================================

Route Inventory:
    - employees.py: /employees/...      (listings, details, create/update/delete)
    - seed.py:      GET /seed_db        (reset schema and load demo data)
    - health.py:    GET /health         (service health check)

Routes are thin: they read the request, call a service with the injected
store, and shape the response. Business rules live in app.services.
"""
