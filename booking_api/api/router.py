from fastapi import APIRouter

from booking_api.routers import bookings, events, shipments

api_router = APIRouter()

api_router.include_router(bookings.router, tags=["Bookings"])
api_router.include_router(shipments.router, tags=["Shipments"])
api_router.include_router(events.router, tags=["Events"])
