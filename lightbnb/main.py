import logging
import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from lightbnb.config import settings
from lightbnb.db.store import Store
from lightbnb.routers import properties
from lightbnb.routers import reservations
from lightbnb.routers import users

structlog.configure(
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(settings.LOG_LEVEL.upper())
    ),
)

app = FastAPI(title="LightBnB")
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_credentials=True, allow_methods=["*"], allow_headers=["*"])

@app.on_event("startup")
async def startup_event():
    app.state.store = Store.from_url(settings.DATABASE_URL, pool_size=settings.DB_POOL_SIZE, echo=settings.DB_ECHO)

@app.on_event("shutdown")
async def shutdown_event():
    store = getattr(app.state, "store", None)
    if store is not None:
        await store.dispose()
        app.state.store = None

app.include_router(properties.router)
app.include_router(reservations.router)
app.include_router(users.router)

@app.get("/health")
async def root_health():
    return "ok"
