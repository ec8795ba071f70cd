"""
Rate calculator tests
=====================

What we test:
    ✅ Cheapest non-document rate across the destination's zones
    ✅ Service mode and vendor narrow the candidates
    ✅ Missing / non-positive / non-numeric weight → 400
    ✅ Missing destination → 400
    ✅ Unknown destination or no matching weight step → 404
    ✅ Zone label parsing and weight parsing helpers
"""

from decimal import Decimal

import pytest
import pytest_asyncio

from courier_api.core.exceptions import ValidationError
from courier_api.domain.files import Zone
from courier_api.domain.rate import DOC_TYPE_DOCUMENT, Rate
from courier_api.services.rates import parse_weight, zone_numbers

CALC = "/api/v1/rates/calc"


@pytest_asyncio.fixture
async def price_lists(seed):
    await seed(
        Zone(code="AE", country="United Arab Emirates", zone="Zone 1",
             service="Express", company="dhl"),
        Zone(code="GB", country="United Kingdom", zone="Zone 3",
             service="Express", company="dhl"),
        Zone(code="GB", country="United Kingdom", zone="2",
             service="Economy", company="fedex"),
        Rate(vendor="DHL", service="Express", zone=3, weight=2.5, price=Decimal("40.00")),
        Rate(vendor="Aramex", service="Express", zone=3, weight=2.5, price=Decimal("35.00")),
        Rate(vendor="DHL", service="Express", zone=3, weight=3.0, price=Decimal("20.00")),
        Rate(vendor="Aramex", service="Express", zone=3, weight=2.5,
             doc_type=DOC_TYPE_DOCUMENT, price=Decimal("5.00")),
        Rate(vendor="FedEx", service="Economy", zone=2, weight=2.5, price=Decimal("10.00")),
        Rate(vendor="DHL", service="Express", zone=1, weight=2.5, price=Decimal("1.00")),
    )


class TestCalculate:

    @pytest.mark.asyncio
    @pytest.mark.usefixtures("price_lists")
    async def test_cheapest_rate_for_service(self, test_client):
        response = await test_client.post(
            CALC, json={"weight": 2.5, "destination": "kingdom", "serviceMode": "Express"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "price": 35.0,
            "weight": 2.5,
            "service": "Express",
            "vendor": "Aramex",
            "zone": 3,
        }

    @pytest.mark.asyncio
    @pytest.mark.usefixtures("price_lists")
    async def test_without_service_every_zone_competes(self, test_client):
        response = await test_client.post(
            CALC, json={"weight": "2.5", "destination": "United Kingdom"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["vendor"] == "FedEx"
        assert body["zone"] == 2
        assert body["price"] == 10.0

    @pytest.mark.asyncio
    @pytest.mark.usefixtures("price_lists")
    async def test_vendor_filter(self, test_client):
        response = await test_client.post(
            CALC,
            json={"weight": 2.5, "destination": "United Kingdom",
                  "vendor": "DHL", "serviceMode": "Express"},
        )

        assert response.status_code == 200
        assert response.json()["vendor"] == "DHL"
        assert response.json()["price"] == 40.0

    @pytest.mark.asyncio
    @pytest.mark.usefixtures("price_lists")
    async def test_unknown_destination(self, test_client):
        response = await test_client.post(CALC, json={"weight": 1, "destination": "Atlantis"})

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["code"] == "NOT_FOUND"
        assert body["error"].startswith("No zones found for destination: Atlantis")

    @pytest.mark.asyncio
    @pytest.mark.usefixtures("price_lists")
    async def test_no_rate_for_weight(self, test_client):
        response = await test_client.post(
            CALC, json={"weight": 7, "destination": "United Kingdom", "serviceMode": "Express"}
        )

        assert response.status_code == 404
        assert response.json()["error"] == (
            "No rates found for destination: United Kingdom and weight: 7kg, service: Express"
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload, error",
        [
            ({"destination": "United Kingdom"}, "Weight is required."),
            ({"weight": "", "destination": "United Kingdom"}, "Weight is required."),
            ({"weight": 0, "destination": "United Kingdom"},
             "Weight must be a valid positive number."),
            ({"weight": -2, "destination": "United Kingdom"},
             "Weight must be a valid positive number."),
            ({"weight": "heavy", "destination": "United Kingdom"},
             "Weight must be a valid positive number."),
            ({"weight": 2.5}, "Destination is required."),
            ({"weight": 2.5, "destination": "  "}, "Destination is required."),
        ],
    )
    async def test_bad_input_never_touches_the_store(
        self, mock_client, mock_db_session, payload, error
    ):
        response = await mock_client.post(CALC, json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == error
        mock_db_session.execute.assert_not_awaited()


class TestHelpers:

    def test_parse_weight(self):
        assert parse_weight("0.5") == 0.5
        assert parse_weight(3) == 3.0
        with pytest.raises(ValidationError):
            parse_weight("nan")

    def test_zone_numbers_dedupes_and_skips_unlabelled(self):
        zones = [
            Zone(code="GB", country="United Kingdom", zone="Zone 3", company="dhl"),
            Zone(code="IE", country="Ireland", zone="3", company="dhl"),
            Zone(code="XX", country="Nowhere", zone="Remote", company="dhl"),
            Zone(code="FR", country="France", zone="Z4", company="dhl"),
        ]

        assert zone_numbers(zones) == [3, 4]
