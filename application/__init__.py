"""
Application Layer for poke-search.

This package contains:
- ports/: Abstract interfaces (what the resolver needs)
- use_cases/: The name resolution policy
- exceptions: Errors shared by the core, infrastructure and CLI layers
"""
