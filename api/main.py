# api/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from core.sa.database import get_database
from api.routes.scraper import router as scraper_router

app = FastAPI(title="Academix Ingest")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(scraper_router)

# Initialize database on startup
@app.on_event("startup")
async def startup_event():
    get_database().init_db()

@app.get("/")
async def root():
    return {"message": "Academix API is running"}

@app.get("/health")
def health():
    """Report whether the database is reachable"""
    try:
        with get_database().engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}
    except Exception as e:
        return JSONResponse(
            status_code=500,
            content={"status": "unhealthy", "database": "disconnected", "error": str(e)}
        )
