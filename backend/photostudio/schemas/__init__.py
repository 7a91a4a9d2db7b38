"""
PhotoStudio Backend — Pydantic Schemas
========================================

- entities:   insert / patch / response shapes per entity
- common:     error, health, and acknowledgement bodies
- validation: typed outcome of validating a raw request body
"""
