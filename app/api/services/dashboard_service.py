from fastapi import HTTPException
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from app.api.schemas.schemas import CHART_KEYS, DashboardStats, SpendSummary
from app.data.transaction_data import CHART_DATA, SPEND_SUMMARY, STATS
from app.utils.charts import render_chart
from app.utils.formatters import format_count, format_pct, format_volume


def _check_chart_key(chart_key: str):
    if chart_key not in CHART_KEYS:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown chart '{chart_key}'. Expected one of: {', '.join(CHART_KEYS)}",
        )


async def get_stats_service():
    display = {
        "total": format_count(STATS["total"]),
        "fraud": format_count(STATS["fraud"]),
        "failed": format_count(STATS["failed"]),
        "volume": format_volume(STATS["volume"]),
        "success_rate": format_pct(STATS["success_rate"]),
        "fraud_rate": format_pct(STATS["fraud_rate"]),
        "failure_rate": format_pct(STATS["failure_rate"]),
    }
    return DashboardStats(**STATS, display=display)


async def get_spend_summary_service():
    return SpendSummary(**SPEND_SUMMARY)


async def get_chart_data_service(chart_key: str):
    _check_chart_key(chart_key)
    return {"chart": chart_key, "data": list(CHART_DATA[chart_key])}


async def get_chart_image_service(chart_key: str):
    _check_chart_key(chart_key)
    png = await run_in_threadpool(render_chart, chart_key)
    print(f"✅ Rendered chart: {chart_key} ({len(png)} bytes)")
    return Response(content=png, media_type="image/png")
