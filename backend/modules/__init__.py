"""
Feature modules for the Kraftflix backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's stores and services
- models.py: Pydantic models for data transfer
- service.py: Business logic implementation
- routes.py: FastAPI route handlers
- exceptions.py: Module-specific exceptions

users and movies also ship a Supabase repository and an in-memory store
behind the same interface. Modules communicate through interfaces, not
concrete implementations.
"""
