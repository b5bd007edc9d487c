# Admissions Hub backend entrypoint: public site API plus the staff back office.

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api import admin_content
from backend.app.api import admin_dashboard
from backend.app.api import admin_enquiries
from backend.app.api import admin_users
from backend.app.api import login
from backend.app.api import public_content
from backend.app.api import public_enquiries
from backend.app.api import register
from backend.app.api import scoped_enquiries
from backend.app.api import site_search
from backend.app.core.dev_seed import ensure_default_admin
from backend.app.core.errors import register_exception_handlers
from backend.app.core.logging import configure_logging
from backend.app.core.settings import get_settings
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        ensure_default_admin(db)
    finally:
        db.close()
    logger.info("%s %s started (%s)", settings.app_name, settings.api_version, settings.environment)
    yield


app = FastAPI(title=settings.app_name, version=settings.api_version, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(register.router)
app.include_router(login.router)
app.include_router(public_enquiries.router)
app.include_router(public_content.router)
app.include_router(site_search.router)
app.include_router(admin_dashboard.router)
app.include_router(admin_users.router)
for router in (
    admin_enquiries.routers
    + scoped_enquiries.routers
    + admin_content.routers
    + admin_content.author_blog_routers
):
    app.include_router(router)


@app.get("/")
def read_root():
    return {"app": settings.app_name, "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}
