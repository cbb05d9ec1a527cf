# safepin/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from safepin.api.v1.endpoints import (
    auth,
    catalogue,
    classes,
    feedback,
    geocode,
    health,
    pins,
    solutions,
    student,
    upload,
)
from safepin.core.config import settings
from safepin.core.exceptions import add_error_handlers
from safepin.core.logging_config import setup_logging
from safepin.db.init_db import init_db

API_PREFIX = "/api/v1"

setup_logging()

app = FastAPI(title=settings.PROJECT_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

add_error_handlers(app)


@app.on_event("startup")
def on_startup():
    init_db()


app.include_router(auth.router, prefix=API_PREFIX)
app.include_router(classes.router, prefix=API_PREFIX)
app.include_router(student.router, prefix=API_PREFIX)
app.include_router(pins.router, prefix=API_PREFIX)
app.include_router(solutions.router, prefix=API_PREFIX)
app.include_router(feedback.router, prefix=API_PREFIX)
app.include_router(upload.router, prefix=API_PREFIX)
app.include_router(geocode.router, prefix=API_PREFIX)
app.include_router(catalogue.router, prefix=API_PREFIX)
app.include_router(health.router, prefix=API_PREFIX)
