from fastapi import FastAPI, Response, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
import logging
import os
import time
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from .client import mount_client
from .routes import (
    users,
    dna_processes,
    workflows,
    workflow_groups,
    worksheets,
    measurements,
)

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

dsn = os.getenv("SENTRY_DSN")
if dsn:
    sentry_sdk.init(dsn=dsn, integrations=[FastApiIntegration()])

REQUEST_COUNT = Counter("request_count", "Total requests", ["method", "endpoint"])
REQUEST_LATENCY = Histogram(
    "request_latency_seconds", "Request latency", ["endpoint"]
)

DEFAULT_CORS = "http://localhost:3000,http://127.0.0.1:3000"
allow_origins = [o.strip() for o in os.getenv("CORS_ORIGINS", DEFAULT_CORS).split(",") if o.strip()]

app = FastAPI(title="DNA Workflow API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

limiter = Limiter(key_func=get_remote_address, default_limits=[os.getenv("RATE_LIMIT", "120/minute")])
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, lambda r, e: Response("Too Many Requests", status_code=429))
if os.getenv("TESTING") != "1":
    app.add_middleware(SlowAPIMiddleware)


@app.middleware("http")
async def record_metrics(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    endpoint = request.url.path
    REQUEST_COUNT.labels(request.method, endpoint).inc()
    REQUEST_LATENCY.labels(endpoint).observe(time.time() - start)
    return response


@app.get("/metrics")
def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


@app.get("/health")
def health():
    return {"ok": True}


app.include_router(users.router)
app.include_router(dna_processes.router)
app.include_router(workflows.router)
app.include_router(workflow_groups.router)
app.include_router(worksheets.router)
app.include_router(measurements.extractions)
app.include_router(measurements.amplifications)
app.include_router(measurements.quantifications)

# a prebuilt browser client is served last so API routes win
static_dir = os.getenv("STATIC_DIR")
if static_dir and os.path.isdir(static_dir):
    mount_client(app, static_dir)
