import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notebuilder.routers import charts

logging.basicConfig(level=logging.INFO)

app = FastAPI(
    title="NoteBuilder API",
    description="Detects onsets in uploaded audio and classifies them into an L/R/U rhythm-game note chart.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(charts.router)


@app.get("/api/health")
async def health():
    return {"status": "ok"}
