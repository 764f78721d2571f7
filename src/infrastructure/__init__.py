"""Infrastructure layer - Adapters implementing domain protocols.

Structure:
- persistence/: SQLAlchemy models, repositories, role seeding
- security/: bcrypt password hashing, JWT access tokens
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
