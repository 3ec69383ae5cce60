"""
Application entry point
Hotel management backend: check-in, rooms, guests, ordering and check-out
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from hotel_management import __version__
from hotel_management.config import settings, configure_logging
from hotel_management.database import init_db, SessionLocal
from hotel_management.routers import checkin, chambers, guests, orders, food, checkout


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    init_db()

    from hotel_management.services.event_handlers import register_event_handlers
    register_event_handlers()

    if settings.SEED_SAMPLE_DATA:
        from hotel_management.init_data import seed_sample_data
        db = SessionLocal()
        try:
            seed_sample_data(db)
        finally:
            db.close()

    yield


app = FastAPI(
    title=settings.APP_NAME,
    description="Check-in, room inventory, ordering and billing",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(checkin.router)
app.include_router(chambers.router)
app.include_router(guests.router)
app.include_router(orders.router)
app.include_router(food.router)
app.include_router(checkout.router)


@app.get("/")
def root():
    return {
        "name": settings.APP_NAME,
        "version": __version__,
    }


@app.get("/health")
def health_check():
    return {"status": "healthy"}
