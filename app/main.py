from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes.chat import router as chat_router
from app.api.routes.dashboard import router as dashboard_router
from app.core.config import APP_TITLE, CORS_ORIGINS, HOST, PORT

app = FastAPI(
    title=APP_TITLE
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat_router, prefix="/Chat")
app.include_router(dashboard_router, prefix="/Dashboard")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)
