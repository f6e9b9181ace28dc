"""
Noteful API — Middleware Package
=================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (request direction):
    Request → [CORS] → [Request ID] → [Logging] → [Bearer Auth] → Route Handler

    1. CORS first: preflight OPTIONS requests carry no Authorization header
       and are answered before the gate sees them
    2. Request ID: correlation ID for logging and error bodies
    3. Logging: records every outcome, 401s included
    4. Bearer Auth: the AuthGate; nothing behind it runs for a rejected request
"""
