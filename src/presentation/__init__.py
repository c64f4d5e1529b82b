"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. The presentation
layer is thin - it builds a command/query from the request and the
authenticated Principal, dispatches it to the application layer and
translates the Result to an HTTP response.

Structure:
- routers/api/v1/: API version 1 endpoints (RESTful resources)
- routers/api/middleware/: Trace IDs and bearer token authentication
- routers/system.py: Root and health endpoints

The presentation layer depends on the application layer (dispatches
commands/queries) but contains NO business logic.
"""
