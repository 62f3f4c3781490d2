import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from dcf_valuation.config import configure_logging, get_settings

settings = get_settings()

# Configure file + console logging
configure_logging(log_file=settings.log_file)
logger = logging.getLogger(__name__)

from dcf_valuation.api.dependencies import STATIC_DIR, get_templates
from dcf_valuation.api.routes import pages, router

app = FastAPI(title="DCF Valuation", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"Request failed: {request.method} {request.url.path} Error: {e}")
        return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})
    duration_ms = (time.time() - start_time) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} in {duration_ms:.1f}ms")
    return response


app.include_router(pages)
app.include_router(router)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# Parse templates once at startup
get_templates()

logger.info("DCF Valuation service started")


@app.get("/health")
async def health():
    return {"status": "ok"}


def serve() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
