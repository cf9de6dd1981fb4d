"""Category taxonomy endpoints."""

from typing import List

from fastapi import APIRouter, HTTPException

from api.models import CategoryInfo
from stockmeta.taxonomy import DEFAULT_TAXONOMY

router = APIRouter()


@router.get("/categories", response_model=List[CategoryInfo])
async def list_categories():
    """List all category codes and names."""
    return [
        CategoryInfo(code=e.code, name=e.name, aliases=sorted(e.aliases))
        for e in DEFAULT_TAXONOMY.entries()
    ]


@router.get("/categories/resolve")
async def resolve_category(name: str):
    """Resolve a category name or alias to its code."""
    code = DEFAULT_TAXONOMY.resolve(name)
    if not code:
        raise HTTPException(status_code=404, detail=f"Unknown category: {name}")
    return {"code": code, "name": DEFAULT_TAXONOMY.name_for(code)}
