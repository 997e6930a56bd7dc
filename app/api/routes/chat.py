from fastapi import APIRouter, UploadFile, File
from app.api.services.chat_service import (
    welcome_service,
    query_service,
    upload_service,
    QueryRequest
)

router = APIRouter(
    prefix="",
    tags=["Chat"]
)

@router.get("/welcome")
async def welcome():
    return await welcome_service()


@router.post("/query")
async def query(request: QueryRequest):
    return await query_service(request)


@router.post("/upload")
async def upload(file: UploadFile = File(...)):
    return await upload_service(file)
