"""
HTTP surface for HevySpotter.

- deps: FastAPI dependency providers
- errors: mapping from application exceptions to HTTP errors
- routers/: one router per resource
- schemas/: request and response models
"""
