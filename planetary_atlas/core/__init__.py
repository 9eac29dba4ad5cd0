"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants, source labels, archive naming
- exceptions: Custom exception hierarchy
"""
