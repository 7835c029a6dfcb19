"""API module for svcgen.

Service definitions, their renderers and the host configuration they resolve against.
"""

__all__ = []
