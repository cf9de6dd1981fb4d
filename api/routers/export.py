"""CSV export endpoint."""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from api.auth import verify_api_key
from api.models import ExportRequest
from stockmeta.errors import ExportError
from stockmeta.export import default_export_filename, metadata_csv_text

router = APIRouter()


@router.post("/export")
async def export_csv(request: ExportRequest, _key=Depends(verify_api_key)):
    """Render completed metadata results as a marketplace CSV."""
    try:
        content = metadata_csv_text(request.results, request.target_extension)
    except ExportError as e:
        raise HTTPException(status_code=422, detail=str(e))

    filename = default_export_filename(request.target_extension)
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
