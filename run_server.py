#!/usr/bin/env python
"""
Run the API Server

Starts the FastAPI server for parsing Google Maps place responses.

Usage:
    python run_server.py

The server runs on http://localhost:8000 (override with GMAPS_ENTRY_API_PORT)

Endpoints:
    GET  /api/health - Health check
    POST /api/entry  - Parse a raw place response into an entry
"""

from gmaps_entry.server import run_server

if __name__ == "__main__":
    run_server()
