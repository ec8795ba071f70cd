"""
Vendor and service mode endpoint tests
======================================

What we test:
    ✅ /rate-vendor returns id + companyName ordered by company name
    ✅ /vendors/{id} detail and unknown id → 404
    ✅ /services ordered by name
"""

import pytest

from courier_api.domain.service_mode import ServiceMode
from courier_api.domain.vendor import Vendor

API = "/api/v1"


class TestVendors:

    @pytest.mark.asyncio
    async def test_rate_vendors_ordered_by_name(self, test_client, seed):
        await seed(
            Vendor(company_name="Zeta Freight", email="ops@zeta.example"),
            Vendor(company_name="Aramex"),
            Vendor(company_name="DHL"),
        )

        response = await test_client.get(f"{API}/rate-vendor")

        assert response.status_code == 200
        data = response.json()["data"]
        assert [v["companyName"] for v in data] == ["Aramex", "DHL", "Zeta Freight"]
        assert set(data[0]) == {"id", "companyName"}

    @pytest.mark.asyncio
    async def test_vendor_detail(self, test_client, seed):
        (vendor,) = await seed(
            Vendor(company_name="Aramex", person_name="Sara", city="Dubai", zip="00000")
        )

        response = await test_client.get(f"{API}/vendors/{vendor.id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["companyName"] == "Aramex"
        assert data["personName"] == "Sara"
        assert data["city"] == "Dubai"

    @pytest.mark.asyncio
    async def test_unknown_vendor(self, test_client):
        response = await test_client.get(f"{API}/vendors/31337")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": "Vendor '31337' not found",
            "code": "NOT_FOUND",
        }


class TestServiceModes:

    @pytest.mark.asyncio
    async def test_ordered_by_name(self, test_client, seed):
        await seed(ServiceMode(name="Express"), ServiceMode(name="Economy"), ServiceMode(name="Cargo"))

        response = await test_client.get(f"{API}/services")

        assert response.status_code == 200
        assert [m["name"] for m in response.json()["data"]] == ["Cargo", "Economy", "Express"]
