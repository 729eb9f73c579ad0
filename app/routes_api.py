# routes_api.py
"""
Read-only JSON endpoints backed by CSV files.

Each endpoint is bound to one fixed file in the data folder and returns the
whole file as a JSON array of records. Access control happens in
AuthGateMiddleware before these handlers run.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.deps import get_settings
from app.errors import CsvReadError
from app.services.csv_reader import read_csv_records
from config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

# resource name -> source file
CSV_RESOURCES: Dict[str, str] = {
    "agencies": "agencies_agency_rows.csv",
    "contacts": "contacts_contact_rows.csv",
}


def error_envelope(label: str, exc: Exception) -> Dict[str, Any]:
    details = str(exc).strip() or "Unknown error"
    return {"error": label, "details": details}


def serve_csv_resource(name: str, settings: Settings) -> JSONResponse:
    """
    Load CSV_RESOURCES[name] fresh from disk and return it as JSON.

    Any failure becomes a 500 with {"error": "Failed to read <name>", "details": ...};
    the specific cause only goes to the log.
    """
    filename = CSV_RESOURCES[name]
    try:
        records = read_csv_records(filename, settings.data_dir)
    except CsvReadError as e:
        logger.error(f"[{name}] Error reading {name}: {e.message} (kind={e.kind.value}, file={e.filename})")
        return JSONResponse(error_envelope(f"Failed to read {name}", e), status_code=500)
    except Exception as e:
        logger.exception(f"[{name}] Error reading {name}: {e!r}")
        return JSONResponse(error_envelope(f"Failed to read {name}", e), status_code=500)

    return JSONResponse(records)


@router.get("/agencies")
def list_agencies(settings: Settings = Depends(get_settings)):
    """
    All rows of agencies_agency_rows.csv.
    """
    return serve_csv_resource("agencies", settings)


@router.get("/contacts")
def list_contacts(settings: Settings = Depends(get_settings)):
    """
    All rows of contacts_contact_rows.csv.
    """
    return serve_csv_resource("contacts", settings)
