"""
API Router - PrintDesk
"""
from fastapi import APIRouter
from printdesk.api.endpoints import (
    orders,
    colours,
    filaments,
    dashboard,
)

router = APIRouter()

# Orders (/data keeps the path the dashboard client has always used)
router.include_router(orders.router)

# Colour catalog
router.include_router(colours.router)

# Filament spools
router.include_router(filaments.router)

# Order table and charts
router.include_router(dashboard.router)
