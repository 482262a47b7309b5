"""
Domain layer for HevySpotter.

This package contains pure domain models and converters that are
independent of infrastructure concerns (HTTP clients, local storage).
"""
