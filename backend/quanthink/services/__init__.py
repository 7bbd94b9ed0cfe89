# Services package init
"""
QuanThink Backend: Services Layer
==================================

What:  Business logic sitting between routes (HTTP) and stores (persistence).
How:   Each service owns the store it was constructed with; routes obtain
       services through the factories in quanthink.dependencies.

Service Inventory:
    - CalculationService: pass-through CRUD for calculations
    - UserService: registration, login, update and removal of users
"""
