"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that change state
- Queries: Read operations that fetch data

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- services/: AccessGuard (gate enforcement shared by every handler)
- dtos/: Handler results returned to the presentation layer

Every handler asks the access gate first and only then touches the store.
The application layer orchestrates domain logic but contains no business rules.
"""
