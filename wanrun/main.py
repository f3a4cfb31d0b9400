from urllib.parse import urlparse

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from wanrun.api.exception_handlers import register_exception_handlers
from wanrun.api.v1.router import api_router
from wanrun.core.config import settings
from wanrun.core.logging_config import setup_logging

setup_logging(settings.log_level, settings.log_file)

app = FastAPI(title="wanrun")

if settings.frontend_url:
    parsed = urlparse(settings.frontend_url)
    origin = f"{parsed.scheme}://{parsed.netloc}"
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
def health():
    return {"status": "ok"}
