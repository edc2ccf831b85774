# Middleware package init
"""
Pastoral Admin Backend — Middleware Package
=============================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Rate Limit] → [Request ID] → [Access Log] → [GZip] → [CORS] → Route

    1. Rate limit rejects a throttled client before a log line is spent; its
       429 carries the client's X-Request-ID or a fresh one
    2. Request ID sets the correlation ID that the access log and the error
       handlers read
    3. Access log records method, path, status and duration on the way out
"""
