"""Material catalog for the marketplace"""

import logging
from typing import Callable, Optional

from ..models.material import Material, MaterialCategory

logger = logging.getLogger(__name__)

# Seed catalog
MATERIALS: dict[str, Material] = {
    "mat-001": Material(
        id="mat-001",
        name="UltraTech OPC 53 Grade Cement",
        description="Ordinary Portland cement for RCC work, 50 kg bag.",
        price=420.0,
        unit="bag",
        category=MaterialCategory.CEMENT,
        subcategory="OPC",
        dealer_id="dealer-01",
        dealer_name="Sharma Building Supplies",
        image_url="/static/images/opc-cement.jpg",
        stock_quantity=500,
    ),
    "mat-002": Material(
        id="mat-002",
        name="ACC PPC Cement",
        description="Portland pozzolana cement for plastering and masonry, 50 kg bag.",
        price=385.0,
        unit="bag",
        category=MaterialCategory.CEMENT,
        subcategory="PPC",
        dealer_id="dealer-02",
        dealer_name="Patel Traders",
        image_url="/static/images/ppc-cement.jpg",
        stock_quantity=350,
    ),
    "mat-003": Material(
        id="mat-003",
        name="TMT Steel Bar Fe 550D 12mm",
        description="Thermo-mechanically treated rebar, sold per 12 m rod.",
        price=780.0,
        unit="rod",
        category=MaterialCategory.STEEL,
        subcategory="TMT",
        dealer_id="dealer-01",
        dealer_name="Sharma Building Supplies",
        image_url="/static/images/tmt-bar.jpg",
        stock_quantity=1200,
    ),
    "mat-004": Material(
        id="mat-004",
        name="Red Clay Bricks",
        description="First class kiln-fired bricks, 230 x 110 x 75 mm.",
        price=9.5,
        unit="piece",
        category=MaterialCategory.BRICKS,
        subcategory="Clay",
        dealer_id="dealer-03",
        dealer_name="Verma Brick Works",
        image_url="/static/images/red-bricks.jpg",
        stock_quantity=20000,
    ),
    "mat-005": Material(
        id="mat-005",
        name="River Sand",
        description="Washed river sand for concrete and plaster.",
        price=65.0,
        unit="cft",
        category=MaterialCategory.SAND,
        dealer_id="dealer-03",
        dealer_name="Verma Brick Works",
        image_url="/static/images/river-sand.jpg",
        stock_quantity=3000,
    ),
    "mat-006": Material(
        id="mat-006",
        name="20mm Crushed Aggregate",
        description="Machine crushed stone aggregate for RCC.",
        price=48.0,
        unit="cft",
        category=MaterialCategory.AGGREGATES,
        dealer_id="dealer-02",
        dealer_name="Patel Traders",
        image_url="/static/images/aggregate.jpg",
        stock_quantity=2500,
    ),
    "mat-007": Material(
        id="mat-007",
        name="Vitrified Floor Tile 600x600",
        description="Double charged glossy vitrified tile, box of 4.",
        price=1150.0,
        unit="box",
        category=MaterialCategory.TILES,
        subcategory="Vitrified",
        dealer_id="dealer-04",
        dealer_name="Kajaria Tile Studio",
        image_url="/static/images/vitrified-tile.jpg",
        stock_quantity=400,
    ),
    "mat-008": Material(
        id="mat-008",
        name="Exterior Emulsion Paint 20L",
        description="Weatherproof acrylic emulsion for exterior walls.",
        price=6400.0,
        unit="bucket",
        category=MaterialCategory.PAINT,
        subcategory="Exterior",
        dealer_id="dealer-04",
        dealer_name="Kajaria Tile Studio",
        image_url="/static/images/exterior-paint.jpg",
        stock_quantity=60,
    ),
    "mat-009": Material(
        id="mat-009",
        name="CPVC Pipe 1 inch",
        description="Hot and cold water CPVC pipe, 3 m length.",
        price=520.0,
        unit="length",
        category=MaterialCategory.PLUMBING,
        subcategory="CPVC",
        dealer_id="dealer-02",
        dealer_name="Patel Traders",
        image_url="/static/images/cpvc-pipe.jpg",
        in_stock=False,
        stock_quantity=0,
    ),
}


class MaterialDatabase:
    """In-memory material catalog"""

    def __init__(self):
        self.materials = {k: m.model_copy() for k, m in MATERIALS.items()}

    def get_material(self, material_id: str) -> Optional[Material]:
        """Get a material by ID"""
        return self.materials.get(material_id)

    def get_material_for_cart_item(self, cart_item_id: str) -> Optional[Material]:
        """Get the catalog material behind a cart line, if it came from the catalog"""
        return next(
            (m for m in self.materials.values() if m.cart_item_id == cart_item_id),
            None,
        )

    def search_materials(
        self,
        query: Optional[str] = None,
        category: Optional[MaterialCategory] = None,
        dealer_id: Optional[str] = None,
        unit: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        in_stock_only: bool = True,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Material], int]:
        """
        Search the catalog in listing order.

        Every word of ``query`` must appear in the material's name, description,
        subcategory or dealer name. Prices are per ``unit`` (bag, rod, piece...),
        so price bounds are usually combined with a unit filter.

        Returns:
            Tuple of (page of materials, total matches before paging)
        """
        words = query.lower().split() if query else []
        checks: list[Callable[[Material], bool]] = []

        if words:
            checks.append(lambda m: all(w in _search_text(m) for w in words))
        if category:
            checks.append(lambda m: m.category == category)
        if dealer_id:
            checks.append(lambda m: m.dealer_id == dealer_id)
        if unit:
            checks.append(lambda m: m.unit.lower() == unit.lower())
        if min_price is not None:
            checks.append(lambda m: m.price >= min_price)
        if max_price is not None:
            checks.append(lambda m: m.price <= max_price)
        if in_stock_only:
            checks.append(lambda m: m.can_supply(1))

        matches = [m for m in self.materials.values() if all(check(m) for check in checks)]
        return matches[offset : offset + limit], len(matches)

    def get_all_materials(self) -> list[Material]:
        return list(self.materials.values())

    def update_stock(self, material_id: str, quantity_change: int) -> bool:
        """Add to (or take from) a dealer's stock; refuses to go below zero"""
        material = self.materials.get(material_id)
        if material is None or not material.can_adjust(quantity_change):
            logger.warning(f"Stock change {quantity_change:+d} refused for {material_id}")
            return False

        material.stock_quantity += quantity_change
        material.in_stock = material.stock_quantity > 0
        logger.debug(f"Stock for {material_id} is now {material.stock_quantity} {material.unit}")
        return True


def _search_text(material: Material) -> str:
    return " ".join(
        filter(None, [material.name, material.description, material.subcategory, material.dealer_name])
    ).lower()
