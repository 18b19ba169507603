# Middleware package init
"""
Warehouse Backend — Middleware Package
========================================

Middleware Chain:
    Request → [CORS] → [Request ID] → [Logging] → [GZip] → Route Handler

    1. CORS: handles preflight and adds CORS headers to every response,
       including the last-resort 500
    2. Request ID: correlation ID for log lines; answers escaped exceptions
    3. Logging: access line with record category, outcome and duration
    4. GZip: compress larger JSON listings
"""
