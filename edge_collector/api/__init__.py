# ==============================================================================
# HTTP API
# ==============================================================================
"""
FastAPI application and routers.

- ingest.py - POST /track, POST /save-recording
- queries.py - GET /totals, GET /recordings, GET /recordings/{id}
- scripts.py - GET /js, GET /record.js
- server.py - create_app() factory
"""
