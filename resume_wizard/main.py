import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from resume_wizard import __version__
from resume_wizard.api.v1.health import router as health_router
from resume_wizard.api.v1.sessions import router as sessions_router
from resume_wizard.api.v1.chat import router as chat_router
from resume_wizard.core.cors import cors_allowed_origins
from resume_wizard.core.rate_limit import limiter
from resume_wizard.core.config import settings
from dotenv import load_dotenv
from resume_wizard.core.lifespan import init_state, lifespan

load_dotenv()
logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="Resume Wizard API", version=__version__, lifespan=lifespan)
init_state(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(sessions_router, prefix="/v1", tags=["Sessions"])
app.include_router(chat_router, prefix="/v1", tags=["Chat"])
