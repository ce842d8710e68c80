"""
Feature modules for the PriceBite backend.

Each module keeps its own:
- models.py: Pydantic models for data transfer
- service.py: Business logic implementation
- routes.py: FastAPI route handlers
- interfaces.py / exceptions.py where the module has a public contract
  or failure modes of its own

Modules communicate through interfaces, not concrete implementations.
"""
