# Middleware package init
"""
Employee Directory Backend: Middleware Package
===============================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the access log line (written on the way out)
    carries the id.
"""
