"""Domain layer - Pure business logic.

This layer contains the roles, value objects, entities, the access gate and
the protocols (ports) for persistence. It has NO dependencies on any
framework or infrastructure.

Structure:
- enums/: Roles, actions, resource kinds, deny reasons
- value_objects/: Principal, ResourceDescriptor, decisions, profiles
- entities/: Company and User
- services/: The pure access gate
- protocols/: Repository and service interfaces
- errors/: Error message constants
"""
