import pytest

FARE_INFO = {"totalFare": 51.69, "members": 4, "sharePerPerson": 12.92, "groupName": "Marauders"}


@pytest.mark.unit
class TestPayments:
    def test_mock_payment(self, test_client, auth_headers):
        response = test_client.post(
            "/payments", json={"fareInfo": FARE_INFO, "method": "mock"}, headers=auth_headers
        )

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        assert body["amount"] == 12.92
        assert body["mock"] is True
        assert body["description"] == "Marauders - Share for 4 wizards"
        assert body["transactionId"].startswith("MOCK_")

    def test_amount_recomputed_from_total(self, test_client, auth_headers):
        tampered = {**FARE_INFO, "sharePerPerson": 0.01}

        response = test_client.post("/payments", json={"fareInfo": tampered}, headers=auth_headers)

        assert response.json()["amount"] == 12.92

    def test_unconfigured_method(self, test_client, auth_headers):
        response = test_client.post(
            "/payments", json={"fareInfo": FARE_INFO, "method": "googlepay"}, headers=auth_headers
        )

        body = response.json()
        assert body["status"] == "error"
        assert body["error"] == "Payment method googlepay unavailable"

    def test_unknown_method_rejected(self, test_client, auth_headers):
        response = test_client.post(
            "/payments", json={"fareInfo": FARE_INFO, "method": "owl-post"}, headers=auth_headers
        )
        assert response.status_code == 422

    def test_rejects_unbounded_total(self, test_client, auth_headers):
        response = test_client.post(
            "/payments",
            content='{"fareInfo": {"totalFare": Infinity, "members": 4, "sharePerPerson": 1}}',
            headers={**auth_headers, "Content-Type": "application/json"},
        )
        assert response.status_code == 422

    def test_history(self, test_client, auth_headers):
        test_client.post("/payments", json={"fareInfo": FARE_INFO}, headers=auth_headers)
        test_client.post(
            "/payments", json={"fareInfo": FARE_INFO, "method": "googlepay"}, headers=auth_headers
        )

        response = test_client.get("/payments/history", headers=auth_headers)

        history = response.json()
        assert len(history) == 1
        assert history[0]["status"] == "success"
