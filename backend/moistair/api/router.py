"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from moistair.api.state import router as state_router
from moistair.api.chart_data import router as chart_data_router
from moistair.api.self_test import router as self_test_router

router = APIRouter()
router.include_router(state_router)
router.include_router(chart_data_router)
router.include_router(self_test_router)
