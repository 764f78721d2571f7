"""Domain layer - Pure business logic.

This layer contains the core business entities, value objects, failure
taxonomy and protocols (ports). It has NO dependencies on any framework or
infrastructure.

Structure:
- entities/: Domain entities (mutable, have identity)
- value_objects/: Value objects (immutable, valid by construction)
- errors/: Closed failure taxonomy carried by Result values
- enums/: Closed enumerations (role names)
- protocols/: Repository and service interfaces
"""
