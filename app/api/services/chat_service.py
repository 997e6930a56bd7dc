import asyncio

from fastapi import HTTPException, UploadFile
from pydantic import BaseModel

from app.api.schemas.schemas import Report, Suggestion, UploadedDataset, WelcomeResponse
from app.api.services.file_analyzer_service import analyze_csv
from app.core.config import (
    ALLOWED_UPLOAD_EXTENSION,
    QUERY_DELAY_SECONDS,
    UPLOAD_DELAY_SECONDS,
)
from app.utils.formatters import to_fixed
from app.utils.intent_engine import detect_intent, RESPONSES


class QueryRequest(BaseModel):
    query: str


SUGGESTIONS = [
    Suggestion(label="Device Failure Rates", q="Compare Android vs iOS failure rates on WiFi and 5G in the evening", icon="📡"),
    Suggestion(label="Fraud by State", q="Which states in India have the most fraud transactions?", icon="🗺️"),
    Suggestion(label="Age Group Risk", q="Which age groups are most involved in fraud and how much money?", icon="👥"),
    Suggestion(label="Spend Patterns", q="When do Food and Entertainment make the most money on weekdays vs weekends?", icon="🛍️"),
]

WELCOME = Report(
    badge="Welcome to PayInsight AI",
    icon="⚡",
    what=(
        "Hello! I'm PayInsight AI — a conversational analytics assistant built on 250,000 real UPI "
        "transactions from 2024. Ask me anything in plain English about payment failures, fraud patterns, "
        "or spending behavior. You can also drag and drop a CSV file anywhere to analyze your own data."
    ),
)

INVALID_FILE = Report(badge="Invalid File", icon="⚠️", what="Please upload a valid .csv file.")


async def welcome_service():
    return WelcomeResponse(message=WELCOME, suggestions=SUGGESTIONS)


async def query_service(request: QueryRequest):
    query = request.query.strip()
    if not query:
        raise HTTPException(status_code=400, detail="Query must not be empty.")

    intent = detect_intent(query)
    print(f"Query intent: {intent}")

    await asyncio.sleep(QUERY_DELAY_SECONDS)
    return RESPONSES.get(intent, RESPONSES["unknown"])


def is_csv_filename(filename):
    return bool(filename) and filename.lower().endswith(ALLOWED_UPLOAD_EXTENSION)


async def upload_service(file: UploadFile):
    """
    Analyze an uploaded CSV. Anything that is not a .csv gets an
    "Invalid File" Report without being read.
    """
    if not is_csv_filename(file.filename):
        return INVALID_FILE

    content = await file.read()
    upload = UploadedDataset(name=file.filename, size=len(content), content=content)
    print(f"📎 Uploaded: {upload.name} ({to_fixed(upload.size / 1024, 1)} KB)")

    report = await analyze_csv(upload)

    await asyncio.sleep(UPLOAD_DELAY_SECONDS)
    return report
