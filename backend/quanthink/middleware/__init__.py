# Middleware package init
"""
QuanThink Backend: Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    - Request ID runs first so every later log line can carry it
    - Access Log records method, path, status and duration on the way out
"""
