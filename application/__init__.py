"""
Application layer for HevySpotter.

This package contains:
- exceptions: the error taxonomy shared by every layer
- ports/: interface contracts the infrastructure layer implements
- use_cases/: orchestration of sync, analysis and routine generation
"""
