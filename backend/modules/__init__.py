"""
Feature modules for the food ordering backend.

Each module is self-contained with its own:
- models.py: Pydantic models for stored documents and write payloads
- repository.py: Document access (privileged or restricted)
- exceptions.py: Module-specific exceptions

The auth module additionally exposes its checks through an interface
(interfaces.py) and implements them in service.py.
"""
