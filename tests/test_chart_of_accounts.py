"""
Chart of accounts endpoint tests
================================

What we test:
    ✅ Create / read / partial update / delete
    ✅ Required fields and duplicate code → 400
    ✅ Deleting an account with journal lines → 400
    ✅ Seeding the default chart once, refusing a second time
    ✅ /test diagnostic in the empty and populated states
    ✅ Pagination, search and filters
"""

from decimal import Decimal

import pytest

from courier_api.domain.accounting import ChartOfAccount, JournalEntryLine
from courier_api.services.chart_defaults import DEFAULT_ACCOUNTS

BASE = "/api/v1/chart-of-accounts"

CASH = {
    "code": "1101",
    "accountName": "Cash",
    "category": "Asset",
    "type": "Current Asset",
    "debitRule": "Increases",
    "creditRule": "Decreases",
    "description": "Physical cash and bank accounts",
}


def _account(code, name, category="Asset", type_="Current Asset", **kwargs):
    return ChartOfAccount(
        code=code, account_name=name, category=category, type=type_,
        debit_rule="Increases", credit_rule="Decreases", **kwargs,
    )


class TestCreateAccount:

    @pytest.mark.asyncio
    async def test_create(self, test_client):
        response = await test_client.post(BASE, json=CASH)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["code"] == "1101"
        assert data["accountName"] == "Cash"
        assert data["isActive"] is True

    @pytest.mark.asyncio
    async def test_missing_required_fields(self, test_client):
        payload = {k: v for k, v in CASH.items() if k != "category"}

        response = await test_client.post(BASE, json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == (
            "Code, account name, category, and type are required"
        )

    @pytest.mark.asyncio
    async def test_duplicate_code(self, test_client):
        await test_client.post(BASE, json=CASH)

        response = await test_client.post(BASE, json={**CASH, "accountName": "Petty Cash"})

        assert response.status_code == 400
        assert response.json()["error"] == "Account code already exists"


class TestReadUpdateDelete:

    @pytest.mark.asyncio
    async def test_get_by_id(self, test_client):
        account_id = (await test_client.post(BASE, json=CASH)).json()["data"]["id"]

        response = await test_client.get(f"{BASE}/{account_id}")

        assert response.status_code == 200
        assert response.json()["data"]["description"] == CASH["description"]

    @pytest.mark.asyncio
    async def test_get_unknown(self, test_client):
        response = await test_client.get(f"{BASE}/404")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, test_client):
        account_id = (await test_client.post(BASE, json=CASH)).json()["data"]["id"]

        response = await test_client.put(
            f"{BASE}/{account_id}", json={"accountName": "Cash at Bank", "isActive": False}
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["accountName"] == "Cash at Bank"
        assert data["isActive"] is False
        assert data["category"] == "Asset"
        assert data["code"] == "1101"

    @pytest.mark.asyncio
    async def test_blank_name_is_ignored_on_update(self, test_client):
        account_id = (await test_client.post(BASE, json=CASH)).json()["data"]["id"]

        response = await test_client.put(f"{BASE}/{account_id}", json={"accountName": ""})

        assert response.json()["data"]["accountName"] == "Cash"

    @pytest.mark.asyncio
    async def test_null_rules_and_status_keep_current_values(self, test_client):
        account_id = (await test_client.post(BASE, json=CASH)).json()["data"]["id"]

        response = await test_client.put(
            f"{BASE}/{account_id}",
            json={"debitRule": None, "creditRule": None, "isActive": None},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["debitRule"] == "Increases"
        assert data["creditRule"] == "Decreases"
        assert data["isActive"] is True

    @pytest.mark.asyncio
    async def test_null_description_clears_it(self, test_client):
        account_id = (await test_client.post(BASE, json=CASH)).json()["data"]["id"]

        response = await test_client.put(f"{BASE}/{account_id}", json={"description": None})

        assert response.status_code == 200
        assert response.json()["data"]["description"] is None

    @pytest.mark.asyncio
    async def test_update_unknown(self, test_client):
        response = await test_client.put(f"{BASE}/77", json={"accountName": "X"})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete(self, test_client):
        account_id = (await test_client.post(BASE, json=CASH)).json()["data"]["id"]

        response = await test_client.delete(f"{BASE}/{account_id}")

        assert response.status_code == 200
        assert response.json()["message"] == "Account deleted successfully"
        assert (await test_client.get(f"{BASE}/{account_id}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_with_journal_lines_is_refused(self, test_client, seed):
        account = _account("1102", "Accounts Receivable")
        await seed(account)
        await seed(JournalEntryLine(account_id=account.id, debit=Decimal("250.00")))

        response = await test_client.delete(f"{BASE}/{account.id}")

        assert response.status_code == 400
        assert response.json()["error"] == "Cannot delete account with existing journal entries"
        assert (await test_client.get(f"{BASE}/{account.id}")).status_code == 200

    @pytest.mark.asyncio
    async def test_delete_unknown(self, test_client):
        response = await test_client.delete(f"{BASE}/9")
        assert response.status_code == 404


class TestInitialize:

    @pytest.mark.asyncio
    async def test_seeds_default_chart(self, test_client):
        response = await test_client.post(f"{BASE}/initialize")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["count"] == len(DEFAULT_ACCOUNTS) == 30

        page = (await test_client.get(BASE, params={"limit": 200})).json()
        assert page["meta"]["total"] == 30

    @pytest.mark.asyncio
    async def test_refuses_when_accounts_exist(self, test_client, seed):
        await seed(_account("9999", "Custom"))

        response = await test_client.post(f"{BASE}/initialize")

        assert response.status_code == 400
        assert response.json()["error"] == "Chart of accounts already initialized"


class TestCheck:

    @pytest.mark.asyncio
    async def test_empty(self, test_client):
        body = (await test_client.get(f"{BASE}/test")).json()

        assert body["accountCount"] == 0
        assert body["sampleAccounts"] == []
        assert body["message"] == "No chart of accounts found. Please initialize them first."

    @pytest.mark.asyncio
    async def test_samples_first_five_by_code(self, test_client):
        await test_client.post(f"{BASE}/initialize")

        body = (await test_client.get(f"{BASE}/test")).json()

        assert body["accountCount"] == 30
        assert body["message"] == "30 accounts found."
        assert [a["code"] for a in body["sampleAccounts"]] == [
            "1101", "1102", "1103", "1104", "1105",
        ]


class TestListAccounts:

    @pytest.mark.asyncio
    async def test_ordered_by_category_then_code(self, test_client, seed):
        await seed(
            _account("5101", "Freight Revenue", category="Revenue", type_="Revenue"),
            _account("1102", "Accounts Receivable"),
            _account("1101", "Cash"),
            _account("2101", "Accounts Payable", category="Liability", type_="Current Liability"),
        )

        data = (await test_client.get(BASE)).json()["data"]

        assert [a["code"] for a in data] == ["1101", "1102", "2101", "5101"]

    @pytest.mark.asyncio
    async def test_pagination_meta(self, test_client, seed):
        await seed(*[_account(f"11{i:02d}", f"Account {i}") for i in range(5)])

        body = (await test_client.get(BASE, params={"page": 2, "limit": 2})).json()

        assert [a["code"] for a in body["data"]] == ["1102", "1103"]
        assert body["meta"] == {"total": 5, "page": 2, "limit": 2, "pages": 3}

    @pytest.mark.asyncio
    async def test_search_matches_name_case_insensitively(self, test_client):
        await test_client.post(f"{BASE}/initialize")

        data = (await test_client.get(BASE, params={"search": "FUEL"})).json()["data"]

        assert {a["code"] for a in data} == {"1103", "4201"}

    @pytest.mark.asyncio
    async def test_filters(self, test_client, seed):
        await seed(
            _account("1101", "Cash"),
            _account("1105", "Fleet Vehicles", type_="Fixed Asset"),
            _account("1106", "Old Warehouse", type_="Fixed Asset", is_active=False),
        )

        data = (
            await test_client.get(BASE, params={"type": "Fixed Asset", "isActive": "true"})
        ).json()["data"]

        assert [a["code"] for a in data] == ["1105"]

    @pytest.mark.asyncio
    async def test_invalid_page(self, test_client):
        response = await test_client.get(BASE, params={"page": 0})
        assert response.status_code == 400
