"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (create, update, delete device)
- Services: Application services that coordinate the use cases
- Task Dispatcher: Worker pool the services run on
"""
