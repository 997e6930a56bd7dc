from typing import Literal, Optional, get_args

from pydantic import BaseModel

ChartKey = Literal["failure", "fraud_state", "fraud_age", "spending"]

CHART_KEYS = get_args(ChartKey)


class Report(BaseModel):
    """A structured chat answer: what happened, why, why it matters."""
    badge: str
    icon: str
    what: str
    why: str = ""
    matters: str = ""
    note: str = ""
    chart: Optional[ChartKey] = None


class UploadedDataset(BaseModel):
    name: str
    size: int
    content: bytes


class Suggestion(BaseModel):
    label: str
    q: str
    icon: str


class WelcomeResponse(BaseModel):
    message: Report
    suggestions: list[Suggestion]


class DashboardStats(BaseModel):
    total: int
    fraud: int
    failed: int
    volume: int
    success_rate: float
    fraud_rate: float
    failure_rate: float
    display: dict[str, str]


class SpendSummary(BaseModel):
    food_weekday_avg: int
    food_weekend_avg: int
    ent_weekday_avg: int
    ent_weekend_avg: int
    food_total_txns: int
    ent_total_txns: int
