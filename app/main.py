import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import get_settings
from app.routers import assignments, dashboard, notes, past_papers, rankings, units

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Class Portal API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(units.router)
app.include_router(notes.router)
app.include_router(past_papers.router)
app.include_router(assignments.router)
app.include_router(rankings.router)
app.include_router(dashboard.router)


@app.get("/")
def root():
    return {"message": "Class Portal API", "docs": "/docs"}
