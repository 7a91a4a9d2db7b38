"""
PhotoStudio Backend — Middleware Package
==========================================

Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [No-Cache] → [Unhandled Error]
            → [GZip] → [CORS] → Route Handler

    1. Request ID:      correlation ID for logs and error bodies
    2. Logging:         one access-log line per request, with the request ID
    3. No-Cache:        every API response is marked uncacheable
    4. Unhandled Error: unexpected exceptions become the generic 500 body
    5. GZip:            compresses larger list responses
    6. CORS:            FastAPI's CORSMiddleware (handles preflight)
"""
