import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.openapi.utils import get_openapi
from smartnotes.shared.db import Base, engine
from smartnotes.shared.log import setup_logging

# import models so they register with Base.metadata
from smartnotes.auth import models as auth_models  # noqa: F401
from smartnotes.notes import models as notes_models  # noqa: F401

# Routers Import
from smartnotes.auth.api import router as auth_router
from smartnotes.notes.api import router as notes_router
from smartnotes.functions.summarize_note import router as functions_router

setup_logging()
logger = logging.getLogger(__name__)

TAGS_METADATA = [
    {"name": "Auth", "description": "Sign up, sign in, current identity"},
    {"name": "Notes", "description": "Owner-scoped note storage"},
    {"name": "Functions", "description": "AI summarization proxy"},
    {"name": "Health", "description": "Service health"},
]

# paths reachable without a bearer token
PUBLIC_PATHS = ["/auth/token", "/auth/register", "/healthz"]

app = FastAPI(
    title="SmartNotes",
    version="0.1.0",
    description="Personal notes with AI-generated summaries.",
    openapi_tags=TAGS_METADATA,
)

# ---- DEV-ONLY error handler (helps you see real errors in Swagger) ----
if os.getenv("ENV", "dev") == "dev":
    @app.exception_handler(Exception)
    async def _dev_ex_handler(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

# ----------------------------------------------------------------------


@app.on_event("startup")
def _init_db():
    Base.metadata.create_all(bind=engine)

@app.get("/healthz", tags=["Health"])
def healthz():
    return {"ok": True}

# --- Custom OpenAPI: bearerAuth as default security except on public paths ---
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )
    schema.setdefault("components", {}).setdefault("securitySchemes", {})
    schema["components"]["securitySchemes"]["bearerAuth"] = {
        "type": "http",
        "scheme": "bearer",
        "bearerFormat": "JWT",
    }
    for path, ops in schema.get("paths", {}).items():
        if path in PUBLIC_PATHS:
            continue
        for op in ops.values():
            op.setdefault("security", [{"bearerAuth": []}])
    app.openapi_schema = schema
    return app.openapi_schema

# Routers
app.include_router(auth_router)
app.include_router(notes_router)
app.include_router(functions_router)

app.openapi = custom_openapi


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("smartnotes.main:app", host="0.0.0.0", port=8000, reload=os.getenv("ENV", "dev") == "dev")
