"""Material catalog API routes"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Query, Depends

from ..core.deps import get_material_db
from ..database.materials import MaterialDatabase
from ..models.material import Material, MaterialCategory, MaterialSearchResponse

router = APIRouter(prefix="/api/materials", tags=["Materials"])


@router.get("", response_model=MaterialSearchResponse)
async def search_materials(
    query: Optional[str] = Query(None, description="Search query"),
    category: Optional[MaterialCategory] = Query(None, description="Filter by category"),
    dealer_id: Optional[str] = Query(None, alias="dealerId", description="Filter by dealer"),
    unit: Optional[str] = Query(None, description="Filter by selling unit (bag, rod, piece...)"),
    min_price: Optional[float] = Query(None, ge=0, description="Minimum price"),
    max_price: Optional[float] = Query(None, ge=0, description="Maximum price"),
    in_stock_only: bool = Query(True, description="Only show in-stock items"),
    limit: int = Query(20, ge=1, le=100, description="Max results"),
    offset: int = Query(0, ge=0, description="Offset for pagination"),
    material_db: MaterialDatabase = Depends(get_material_db),
):
    """Search materials in the catalog"""
    materials, total = material_db.search_materials(
        query=query,
        category=category,
        dealer_id=dealer_id,
        unit=unit,
        min_price=min_price,
        max_price=max_price,
        in_stock_only=in_stock_only,
        limit=limit,
        offset=offset,
    )

    return MaterialSearchResponse(
        materials=materials,
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/categories", response_model=list[str])
async def list_categories():
    """List all material categories"""
    return [c.value for c in MaterialCategory]


@router.get("/{material_id}", response_model=Material)
async def get_material(
    material_id: str,
    material_db: MaterialDatabase = Depends(get_material_db),
):
    """Get a material by ID"""
    material = material_db.get_material(material_id)
    if not material:
        raise HTTPException(status_code=404, detail="Material not found")
    return material
