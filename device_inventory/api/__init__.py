"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Controllers: FastAPI route handlers
- Error handlers: ErrorKind to status code mapping
- Dependencies: Dependency injection setup
"""
