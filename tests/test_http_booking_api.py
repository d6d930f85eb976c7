"""
Tests for the httpx adapter against a mocked transport.
"""

from __future__ import annotations

import asyncio
import json
from decimal import Decimal

import httpx

from barber_booking.domain.entities.reservation import ReservationRequest
from barber_booking.infrastructure.api.http_booking_api import HttpBookingApi

BASE_URL = "http://backend.test"

REQUEST = ReservationRequest(
    name="Ana",
    phone="+54 11 2345-6789",
    service_id=4,
    date="2025-07-01",
    time="10:00",
)


def _call(handler, method: str, *args):
    async def scenario():
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        api = HttpBookingApi(base_url=BASE_URL, client=client)
        try:
            return await getattr(api, method)(*args)
        finally:
            await api.aclose()

    return asyncio.run(scenario())


def test_list_services_reads_wire_names():
    """Test that services are read from their Spanish wire names."""
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/servicios"
        return httpx.Response(200, json=[{"id": 7, "nombre": "Corte", "duracion": 30, "precio": 1500.0}])

    result = _call(handler, "list_services")

    assert result.ok
    service = result.value[0]
    assert service.id == 7
    assert service.name == "Corte"
    assert service.duration_minutes == 30
    assert service.price == Decimal("1500.0")
    assert service.label == "Corte (30 min)"


def test_list_services_server_error_is_failure():
    """Test that a 500 is reported as a failure."""
    result = _call(lambda request: httpx.Response(500), "list_services")

    assert not result.ok
    assert result.error


def test_list_services_malformed_payload_is_failure():
    """Test that a non-list services body is reported as a failure."""
    result = _call(lambda request: httpx.Response(200, json={"servicios": []}), "list_services")

    assert not result.ok


def test_list_services_non_json_is_failure():
    """Test that a non-JSON body is reported as a failure."""
    result = _call(lambda request: httpx.Response(200, text="<html>"), "list_services")

    assert not result.ok


def test_network_error_is_failure():
    """Test that a connection error is reported as a failure."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = _call(handler, "list_slots", 4, "2025-07-01")

    assert not result.ok
    assert "unreachable" in result.error


def test_list_slots_sends_service_and_date():
    """Test that the slots query carries servicioId and fecha."""
    seen: dict[str, str] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.url.params)
        return httpx.Response(200, json={"horarios": ["10:00", "10:30:00"]})

    result = _call(handler, "list_slots", 4, "2025-07-01")

    assert seen == {"servicioId": "4", "fecha": "2025-07-01"}
    assert result.ok
    assert result.value == ["10:00", "10:30:00"]


def test_list_slots_without_list_is_empty():
    """Test that a missing horarios list reads as empty."""
    result = _call(lambda request: httpx.Response(200, json={"horarios": None}), "list_slots", 4, "2025-07-01")

    assert result.ok
    assert result.value == []


def test_list_slots_non_object_is_failure():
    """Test that a non-object slots body is reported as a failure."""
    result = _call(lambda request: httpx.Response(200, json=["10:00"]), "list_slots", 4, "2025-07-01")

    assert not result.ok


def test_create_reservation_posts_wire_body():
    """Test that the reservation body uses the wire names."""
    sent: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/api/reservas"
        sent.update(json.loads(request.content))
        return httpx.Response(201, json={"reserva": {"id": 1, "fecha": "2025-07-01", "hora": "10:00"}})

    result = _call(handler, "create_reservation", REQUEST)

    assert sent == {
        "nombre": "Ana",
        "telefono": "+54 11 2345-6789",
        "servicio": 4,
        "fecha": "2025-07-01",
        "hora": "10:00",
    }
    assert result.ok
    assert result.value.fecha == "2025-07-01"
    assert result.value.hora == "10:00"


def test_create_reservation_without_echo_still_succeeds():
    """Test that a success without reserva still counts as success."""
    result = _call(lambda request: httpx.Response(201, json={}), "create_reservation", REQUEST)

    assert result.ok
    assert result.value.fecha is None
    assert result.value.hora is None


def test_create_reservation_rejection_carries_error_text():
    """Test that the backend's error text is kept on rejection."""
    result = _call(
        lambda request: httpx.Response(409, json={"error": "El horario ya fue reservado"}),
        "create_reservation",
        REQUEST,
    )

    assert not result.ok
    assert result.error == "El horario ya fue reservado"


def test_create_reservation_rejection_without_body():
    """Test that a rejection without a JSON body gets a default error."""
    result = _call(lambda request: httpx.Response(503, text="down"), "create_reservation", REQUEST)

    assert not result.ok
    assert result.error == "No se pudo crear la reserva"
