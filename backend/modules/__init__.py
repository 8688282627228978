"""
Feature modules for the Yoga Master backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- service.py / policy.py: Business logic implementation
- repository.py: Supabase data access
- exceptions.py: Module-specific exceptions

Routes live in api/routes and reach modules through api/dependencies.py.
"""
