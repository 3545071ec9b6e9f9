import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.exceptions.handlers import register_exception_handlers
from app.routers.bookings.bookings import bookings_router
from app.routers.slots.slots import slots_router

logging.basicConfig(
    level=logging.INFO,  # Set the minimum level to log
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

app = FastAPI(
    title="Slot Booking API",
    description="Publish time slots and book them without double-booking",
    version="0.1.0",
    license_info={
        "name": "MIT",
    },
)

origins = [
    "http://localhost",
    "http://localhost:8080",
    "http://localhost:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(slots_router)
app.include_router(bookings_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
