"""Domain layer for health metrics.

Pure calculation services and value objects, decoupled from HTTP,
persistence and presentation.
"""
