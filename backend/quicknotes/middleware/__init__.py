# Middleware package init
"""
QuickNotes Backend — Middleware Package
========================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first so every later log line can be correlated
    2. Logging wraps everything below it, so durations include the handler

Responses flow back through the chain in reverse order, which is when the
X-Request-ID header is added and the access line is written.
"""
