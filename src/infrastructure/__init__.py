"""Infrastructure layer - Adapters for the domain ports.

This layer contains implementations of domain protocols (ports):
- Company and company user repositories (SQLAlchemy)
- Password hashing (bcrypt) and access tokens (JWT)
- Structured logging (structlog)

Structure:
- persistence/: Database engine, models and repositories
- security/: Password and token services
- logging/: Logger adapters

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
