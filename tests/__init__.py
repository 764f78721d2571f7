"""Test suite for the account service.

Test structure follows the test pyramid:
- unit/: Unit tests - domain logic and adapters in isolation
- integration/: Integration tests - repositories, services, security adapters
- api/: API endpoint tests - HTTP request/response cycle

Integration and API tests run against throwaway SQLite files.
"""
