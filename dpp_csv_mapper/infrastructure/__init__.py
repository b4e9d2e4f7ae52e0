"""Infrastructure layer.

Concrete adapters for files, persistence and console output.
"""
