"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Property paths, sentinel defaults, geometry type names
- exceptions: Custom exception hierarchy
"""
