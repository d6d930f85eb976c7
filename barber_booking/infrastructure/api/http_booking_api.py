from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from barber_booking.application.dto.api_result import ApiResult
from barber_booking.application.dto.booking_payloads import (
    ErrorResponseDTO,
    ReservationBodyDTO,
    ReservationEchoDTO,
    ReservationResponseDTO,
    ServiceDTO,
    SlotListDTO,
)
from barber_booking.application.exceptions import BookingApiError, BookingContractError
from barber_booking.application.ports.booking_api import BookingApiPort
from barber_booking.core.config import settings
from barber_booking.domain.entities.reservation import ReservationRequest
from barber_booking.domain.entities.service import Service

_SERVICE_LIST = TypeAdapter(list[ServiceDTO])


class HttpBookingApi(BookingApiPort):
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = (base_url or settings.BOOKING_API_BASE_URL).rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout or settings.HTTP_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

    async def list_services(self) -> ApiResult[list[Service]]:
        try:
            data = await self._get_json("/api/servicios")
            services = [dto.to_entity() for dto in _SERVICE_LIST.validate_python(data)]
            return ApiResult.success(services)
        except ValidationError as e:
            return self._failed("Malformed services payload", BookingContractError(str(e)))
        except (BookingApiError, BookingContractError) as e:
            return self._failed("Error listing services", e)

    async def list_slots(self, service_id: int, date: str) -> ApiResult[list[str]]:
        try:
            data = await self._get_json(
                "/api/horarios",
                params={"servicioId": str(service_id), "fecha": date},
            )
            if not isinstance(data, dict):
                raise BookingContractError("Slots payload is not an object")
            return ApiResult.success(SlotListDTO.model_validate(data).horarios)
        except ValidationError as e:
            return self._failed("Malformed slots payload", BookingContractError(str(e)), service_id=service_id, date=date)
        except (BookingApiError, BookingContractError) as e:
            return self._failed("Error listing slots", e, service_id=service_id, date=date)

    async def create_reservation(self, request: ReservationRequest) -> ApiResult[ReservationEchoDTO]:
        payload = ReservationBodyDTO.from_request(request).to_wire()
        try:
            response = await self._client.post(f"{self._base_url}/api/reservas", json=payload)
        except httpx.HTTPError as e:
            return self._failed("Error creating reservation", BookingApiError(str(e)), date=request.date, time=request.time)

        if response.status_code >= 400:
            error_message = _error_text(response) or "No se pudo crear la reserva"
            return self._failed(
                "Reservation rejected",
                BookingApiError(error_message),
                status=response.status_code,
                date=request.date,
                time=request.time,
            )

        try:
            body = ReservationResponseDTO.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            return self._failed("Malformed reservation payload", BookingContractError(str(e)), date=request.date, time=request.time)

        echo = body.reserva or ReservationEchoDTO()
        self._logger.info("Reservation created", extra={"date": echo.fecha, "time": echo.hora})
        return ApiResult.success(echo)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        try:
            response = await self._client.get(f"{self._base_url}{path}", params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise BookingApiError(f"{path} answered {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise BookingApiError(f"{path} unreachable: {e}") from e
        try:
            return response.json()
        except ValueError as e:
            raise BookingContractError(f"{path} did not return JSON") from e

    def _failed(self, reason: str, error: Exception, **context: Any) -> ApiResult[Any]:
        self._logger.warning(reason, extra={"error": str(error), **context})
        return ApiResult.failure(str(error))


def _error_text(response: httpx.Response) -> str | None:
    try:
        return ErrorResponseDTO.model_validate(response.json()).error
    except (ValueError, ValidationError):
        return None
