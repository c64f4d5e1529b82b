"""Test suite for the company access service.

Test structure follows the test pyramid:
- unit/: Unit tests - Domain logic, handlers and adapters in isolation
- integration/: Integration tests - Repositories and handlers against a real
  (in-memory SQLite) database
- api/: API endpoint tests - HTTP request/response cycle with stub handlers
"""
