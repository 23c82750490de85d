"""Domain layer: pure value types with no I/O.

Dependency direction: infrastructure -> domain, never the reverse.
"""
