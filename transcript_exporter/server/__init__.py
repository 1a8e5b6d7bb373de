"""HTTP API server for transcript export.

WHY: Web clients need an HTTP endpoint that turns a fetched transcript
into a file download. This package provides a FastAPI application with
an export route, format listing and a health check.

HOW: app.py defines the FastAPI app and routes. models.py defines the
Pydantic request/response schemas.

RULES:
- Run with: uvicorn transcript_exporter.server.app:app
- OpenAPI docs at /docs, ReDoc at /redoc
"""
