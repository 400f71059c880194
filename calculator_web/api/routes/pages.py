from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parents[2] / "static"
CALCULATOR_PAGE = STATIC_DIR / "calculator.html"

router = APIRouter(tags=["pages"])


@router.get("/", response_class=FileResponse, include_in_schema=False)
async def home() -> FileResponse:
    return FileResponse(CALCULATOR_PAGE, media_type="text/html")
