"""
PhotoStudio Backend — Route Handlers
======================================

Every entity handler follows one pipeline:
    1. validate the raw body into a typed outcome (schemas/validation.py)
    2. on Invalid → 400 with field errors, no storage call
    3. call exactly one Storage Access Layer operation
    4. return the row(s); StorageError is turned into a generic 500 by the
       global handler in main.py
"""

from photostudio.routes import bookings, contacts, email, health, messages, portfolio, uploads

ALL_ROUTERS = (
    contacts.router,
    bookings.router,
    portfolio.router,
    messages.router,
    uploads.router,
    email.router,
    health.router,
)
