# Routes package init
"""
QuanThink Backend: API Routes Package
======================================

Route Inventory:
    - calculations.py: GET/POST /calculations, GET/PUT/DELETE /calculations/{id}
    - users.py:        GET/POST /users, GET/PUT/DELETE /users/{id}, POST /login
    - health.py:       GET /health

Routes are thin: they read the request, call one service method, and
choose the status code. Errors are raised, not returned; the handlers in
quanthink.main render them.
"""
