"""
QuanThink Backend: Entity Stores
=================================

What:  One persistence object per entity type, keyed by a numeric id.
How:   Each store wraps the request's AsyncSession and exposes the same
       five operations: get_all, get_by_id, create, update, delete.

Store Inventory:
    - EntityStore (generic): shared CRUD over any ORM model
    - CalculationStore: EntityStore bound to Calculation
    - UserStore: adds find_by_email and maps email collisions to
      DuplicateEmailError

Absence is signalled with None (get_by_id, update); underlying database
failures surface as StorageError.
"""
