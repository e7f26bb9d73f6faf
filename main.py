from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from routers import cars
import logging
import time

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Cars Owner API")

# Global exception handler so unexpected errors never leak internals
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    logger.info("Request: %s %s", request.method, request.url.path)

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info("Response: %s in %.4fs", response.status_code, process_time)
    return response

# -----------------------------
# Routers
# -----------------------------
app.include_router(cars.router)

@app.get("/health")
def health():
    return {"status": "ok"}
