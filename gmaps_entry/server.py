"""
FastAPI Server for the Google Maps Place Entry Extractor

Provides API endpoints for:
- Health checks
- Parsing a raw place response into an entry
"""

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from .exceptions import EntryValidationError, MalformedDocumentError, UnexpectedFaultError
from .parsers import entry_from_json

logger = logging.getLogger(__name__)

# FastAPI app
app = FastAPI(title="Google Maps Place Entry Extractor API")

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request Models
class EntryRequest(BaseModel):
    raw: str  # Response body of /maps/preview/place, )]}' prefix allowed
    require_valid: Optional[bool] = False  # Reject entries without name or category
    include_csv: Optional[bool] = False  # Include the flattened CSV row


class EntryResponse(BaseModel):
    success: bool
    valid: bool
    entry: dict
    csv_row: Optional[List[str]] = None


# API Endpoints
@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/api/entry", response_model=EntryResponse)
def parse_entry(request: EntryRequest):
    """Parse a raw place response into an entry."""
    try:
        entry = entry_from_json(request.raw)
    except MalformedDocumentError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except UnexpectedFaultError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if request.require_valid:
        try:
            entry.ensure_valid()
        except EntryValidationError as e:
            raise HTTPException(status_code=422, detail=str(e))

    return EntryResponse(
        success=True,
        valid=entry.is_valid(),
        entry=entry.model_dump(mode="json", by_alias=True),
        csv_row=entry.csv_row() if request.include_csv else None,
    )


def run_server(host: str = None, port: int = None):
    """Run the API server."""
    import uvicorn
    from .config_manager import ExtractorConfig

    server_config = ExtractorConfig(server_host=host, server_port=port)
    server_config.apply()
    server_config.configure_logging()

    logger.info("Starting server on %s:%s", server_config.server_host, server_config.server_port)
    uvicorn.run(app, host=server_config.server_host, port=server_config.server_port)


if __name__ == "__main__":
    run_server()
