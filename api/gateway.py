# api/gateway.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from database.db_session import init_db
from database.errors import DatabaseError
from settings import CREATE_TABLES_ON_STARTUP, LOG_LEVEL

from api.auth import router as auth_router
from api.customer_routes import router as customer_router
from api.dashboard_routes import router as dashboard_router
from api.invoice_routes import router as invoice_router

# Setup
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("api.gateway")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if CREATE_TABLES_ON_STARTUP:
        init_db()
        logger.info("Database tables ensured")
    yield


app = FastAPI(title="Invoice Dashboard API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(invoice_router)
app.include_router(customer_router)


@app.exception_handler(DatabaseError)
async def database_error_handler(request: Request, exc: DatabaseError):
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.gateway:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
