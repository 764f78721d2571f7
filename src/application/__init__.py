"""Use cases.

dtos      request validation and response projections
services  UserService, AuthService
"""
