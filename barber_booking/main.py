from fastapi import FastAPI

from barber_booking.api.backend_stub import ReservationBook, router as backend_router
from barber_booking.core.config import settings
from barber_booking.core.logging_config import configure_logging


def create_app(reservation_book: ReservationBook | None = None) -> FastAPI:
    app = FastAPI(title=f"{settings.BUSINESS_NAME} booking backend (dev stub)", version="1.0.0")
    app.state.reservation_book = reservation_book or ReservationBook()
    app.include_router(backend_router, tags=["booking"])

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


configure_logging()
app = create_app()
