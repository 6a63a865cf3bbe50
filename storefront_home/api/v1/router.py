"""
Main API router for v1.
"""

from fastapi import APIRouter
from storefront_home.api.v1 import home

router = APIRouter()

router.include_router(home.router, prefix="/home", tags=["home"])
