from fastapi import APIRouter
from app.api.services.dashboard_service import (
    get_stats_service,
    get_spend_summary_service,
    get_chart_data_service,
    get_chart_image_service,
)

router = APIRouter(
    prefix="",
    tags=["Dashboard"]
)

# 1️⃣ Headline KPIs
@router.get("/stats")
async def get_stats():
    return await get_stats_service()


# 2️⃣ Spend Summary
@router.get("/spend_summary")
async def get_spend_summary():
    return await get_spend_summary_service()


# 3️⃣ Chart Data
@router.get("/chart_data/{chart_key}")
async def get_chart_data(chart_key: str):
    return await get_chart_data_service(chart_key)


# 4️⃣ Chart Image (PNG)
@router.get("/chart/{chart_key}")
async def get_chart_image(chart_key: str):
    return await get_chart_image_service(chart_key)
