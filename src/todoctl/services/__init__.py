"""Service layer: command dispatch and the CLI-facing todo service.

INVARIANT: TodoService methods return ServiceResult.
"""
