import re
from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.api.deps import (
    get_accommodation_repository,
    get_booking_repository,
    get_currency_store,
    get_gateway_service,
    get_settings_repository,
)
from app.domain.currency import DEFAULT_CURRENCIES
from app.domain.records import AccommodationRecord
from app.gateways.base import GatewayType, PaymentGateway, PaymentResult
from app.main import app
from app.services.currency_preference import CurrencyPreferenceStore, InMemoryKeyValueStore
from app.services.gateway_service import GatewayService
from tests.conftest import make_booking

BOOKED = make_booking(1, date(2024, 6, 1), date(2024, 6, 10), total_price=Decimal("1000"))
OTHER = make_booking(1, date(2024, 7, 20), date(2024, 7, 25), total_price=Decimal("500"))

ACCOMMODATIONS = [
    AccommodationRecord(
        id=1,
        name="Dar Jasmin",
        location="Hammamet",
        price_per_night=Decimal("120"),
        monthly_prices={6: Decimal("100")},
    ),
    AccommodationRecord(id=2, name="Villa Bleue", location="Djerba", price_per_night=Decimal("200")),
]


class FakeBookingRepository:
    def __init__(self, bookings):
        self.bookings = list(bookings)

    async def list_all(self):
        return self.bookings

    async def get(self, booking_id):
        return next((b for b in self.bookings if b.id == booking_id), None)


class FakeSettingsRepository:
    async def currency_table(self):
        return list(DEFAULT_CURRENCIES)


class FakeAccommodationRepository:
    async def list_all(self):
        return ACCOMMODATIONS


class FakeGateway(PaymentGateway):
    def __init__(self, succeed: bool = True):
        self.succeed = succeed

    @property
    def gateway_type(self) -> GatewayType:
        return GatewayType.KONNECT

    async def create_payment(self, amount, currency, reference_id, description):
        if not self.succeed:
            return PaymentResult(success=False, error_message="declined")
        return PaymentResult(success=True, transaction_id="ref-1", redirect_url="https://pay.test/ref-1")


def digits(text: str) -> str:
    return re.sub(r"\D", "", text)


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def client(gateway):
    store = CurrencyPreferenceStore(InMemoryKeyValueStore())
    app.dependency_overrides[get_booking_repository] = lambda: FakeBookingRepository([BOOKED, OTHER])
    app.dependency_overrides[get_settings_repository] = lambda: FakeSettingsRepository()
    app.dependency_overrides[get_accommodation_repository] = lambda: FakeAccommodationRepository()
    app.dependency_overrides[get_currency_store] = lambda: store
    app.dependency_overrides[get_gateway_service] = lambda: GatewayService(gateway)

    yield TestClient(app)

    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["base_currency"] == "TND"
    assert "X-Request-ID" in response.headers


def test_availability(client):
    booked = client.get("/api/v1/availability/1", params={"start": "2024-06-10", "end": "2024-06-15"})
    free = client.get("/api/v1/availability/1", params={"start": "2024-06-11", "end": "2024-06-15"})
    no_dates = client.get("/api/v1/availability/1")

    assert booked.json()["available"] is False
    assert free.json()["available"] is True
    assert no_dates.json()["available"] is True


def test_availability_rejects_reversed_range(client):
    response = client.get("/api/v1/availability/1", params={"start": "2024-06-15", "end": "2024-06-11"})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "end"


def test_search_returns_free_accommodations(client):
    response = client.get("/api/v1/search/", params={"start": "2024-06-05", "end": "2024-06-08"})

    data = response.json()
    assert response.status_code == 200
    assert [a["id"] for a in data["accommodations"]] == [2]
    assert data["currency"] == "TND"


def test_search_by_location(client):
    response = client.get("/api/v1/search/", params={"location": "hammamet"})

    assert [a["name"] for a in response.json()["accommodations"]] == ["Dar Jasmin"]


def test_quote_uses_month_price(client):
    response = client.get(
        "/api/v1/accommodations/1/quote", params={"start": "2024-06-01", "end": "2024-06-05"}
    )

    data = response.json()
    assert data["nights"] == 4
    assert Decimal(data["total_price"]) == Decimal("400")
    assert data["available"] is False


def test_quote_unknown_accommodation(client):
    response = client.get(
        "/api/v1/accommodations/99/quote", params={"start": "2024-06-01", "end": "2024-06-05"}
    )

    assert response.status_code == 404


def test_currency_table(client):
    response = client.get("/api/v1/currencies")

    data = response.json()
    assert data["base_currency"] == "TND"
    assert [c["code"] for c in data["currencies"]] == ["TND", "EUR", "USD"]


def test_format_price_unknown_currency(client):
    response = client.get("/api/v1/prices/format", params={"amount": "100", "currency": "GBP"})

    assert response.json()["display"] == "100 TND"
    assert response.json()["converted"] is None


def test_format_price_includes_converted_amount(client):
    response = client.get("/api/v1/prices/format", params={"amount": "100", "currency": "EUR"})

    assert Decimal(response.json()["converted"]) == Decimal("29.00")
    assert digits(response.json()["display"]) == "29"


def test_currency_preference_is_kept_per_client(client):
    headers = {"X-Client-ID": "guest-1"}

    saved = client.put("/api/v1/preferences/currency", json={"currency": "eur"}, headers=headers)
    formatted = client.get("/api/v1/prices/format", params={"amount": "100"}, headers=headers)
    other = client.get("/api/v1/preferences/currency", headers={"X-Client-ID": "guest-2"})

    assert saved.json() == {"currency": "EUR"}
    assert formatted.json()["currency"] == "EUR"
    assert digits(formatted.json()["display"]) == "29"
    assert other.json() == {"currency": "TND"}


def test_currency_preference_rejects_invalid_code(client):
    response = client.put("/api/v1/preferences/currency", json={"currency": "E1R"})

    assert response.status_code == 422


def test_payment_split(client):
    response = client.get(f"/api/v1/bookings/{BOOKED.id}/payments")

    data = response.json()
    assert Decimal(data["deposit"]) == Decimal("300")
    assert Decimal(data["remaining"]) == Decimal("700")
    assert digits(data["deposit_display"]) == "300"


def test_init_payment(client):
    response = client.post(
        "/api/v1/payments/init", json={"booking_id": str(BOOKED.id), "plan": "deposit"}
    )

    data = response.json()
    assert response.status_code == 201
    assert data["gateway_amount"] == 300000
    assert data["pay_url"] == "https://pay.test/ref-1"
    assert response.headers["Cache-Control"] == "no-store"


def test_init_payment_in_selected_currency(client):
    response = client.post(
        "/api/v1/payments/init",
        json={"booking_id": str(BOOKED.id), "plan": "full", "currency": "EUR"},
    )

    assert response.status_code == 201
    assert response.json()["gateway_amount"] == 290


def test_init_payment_unknown_booking(client):
    response = client.post(
        "/api/v1/payments/init",
        json={"booking_id": "00000000-0000-0000-0000-000000000000", "plan": "full"},
    )

    assert response.status_code == 404


@pytest.mark.parametrize("gateway", [FakeGateway(succeed=False)])
def test_init_payment_gateway_failure(client):
    response = client.post(
        "/api/v1/payments/init", json={"booking_id": str(BOOKED.id), "plan": "full"}
    )

    assert response.status_code == 402
    assert response.json() == {"detail": "Payment processing failed"}


def test_dashboard_overview(client):
    response = client.get("/api/v1/dashboard/overview")

    data = response.json()
    assert data["accommodations"] == 2
    assert set(data["cash"]) == {"total", "week", "month"}


def test_blocked_dates_are_inclusive(client):
    response = client.get(
        "/api/v1/accommodations/1/blocked-dates", params={"start": "2024-06-08", "end": "2024-06-12"}
    )

    assert response.json()["blocked"] == ["2024-06-08", "2024-06-09", "2024-06-10"]


def test_blocked_dates_single_day(client):
    response = client.get(
        "/api/v1/accommodations/1/blocked-dates", params={"start": "2024-06-10", "end": "2024-06-10"}
    )

    assert response.status_code == 200
    assert response.json()["blocked"] == ["2024-06-10"]


def test_blocked_dates_ignore_other_accommodations(client):
    response = client.get(
        "/api/v1/accommodations/2/blocked-dates", params={"start": "2024-06-01", "end": "2024-06-30"}
    )

    assert response.json()["blocked"] == []


def test_blocked_dates_window_is_limited(client):
    response = client.get(
        "/api/v1/accommodations/1/blocked-dates", params={"start": "2024-01-01", "end": "2025-06-01"}
    )

    assert response.status_code == 422


def test_date_change_quote_charges_each_day(client):
    response = client.get(
        f"/api/v1/bookings/{BOOKED.id}/date-change-quote",
        params={"start": "2024-06-29", "end": "2024-07-02"},
    )

    # two June days at the month price, two July days at the default price
    assert Decimal(response.json()["total_price"]) == Decimal("440")


def test_date_change_quote_rejects_overlap_with_other_booking(client):
    response = client.get(
        f"/api/v1/bookings/{BOOKED.id}/date-change-quote",
        params={"start": "2024-07-22", "end": "2024-07-24"},
    )

    assert response.status_code == 409
    assert response.json()["detail"] == "These dates are not available"


def test_date_change_quote_ignores_the_moved_booking(client):
    response = client.get(
        f"/api/v1/bookings/{BOOKED.id}/date-change-quote",
        params={"start": "2024-06-05", "end": "2024-06-12"},
    )

    assert response.status_code == 200


def test_currency_store_is_closed_on_shutdown(monkeypatch):
    closed = []

    class RecordingStore(InMemoryKeyValueStore):
        async def close(self):
            closed.append(True)

    monkeypatch.setattr(
        "app.api.deps._currency_store", CurrencyPreferenceStore(RecordingStore())
    )

    with TestClient(app):
        assert closed == []

    assert closed == [True]
