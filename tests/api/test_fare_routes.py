import pytest

DELHI = {"name": "Connaught Place, New Delhi", "lat": 28.6139, "lng": 77.2090}
NOIDA = {"name": "Sector 18, Noida", "lat": 28.5355, "lng": 77.3910}


@pytest.mark.unit
class TestEstimate:
    def test_breakdown(self, test_client, auth_headers):
        response = test_client.post(
            "/fares/estimate", json={"distanceKm": 10, "durationMin": 20}, headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json() == {
            "baseFare": 2.0,
            "distanceCharge": 15.0,
            "timeCharge": 10.0,
            "totalFare": 27.0,
        }

    def test_rejects_negative_distance(self, test_client, auth_headers):
        response = test_client.post(
            "/fares/estimate", json={"distanceKm": -1, "durationMin": 20}, headers=auth_headers
        )
        assert response.status_code == 422

    @pytest.mark.parametrize(
        "body",
        [
            '{"distanceKm": 1e307, "durationMin": 1}',
            '{"distanceKm": 10, "durationMin": 20001}',
            '{"distanceKm": Infinity, "durationMin": 1}',
            '{"distanceKm": 10, "durationMin": NaN}',
        ],
    )
    def test_rejects_out_of_range_trip(self, test_client, auth_headers, body):
        response = test_client.post(
            "/fares/estimate",
            content=body,
            headers={**auth_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert response.json()["detail"][0]["loc"][0] == "body"


@pytest.mark.unit
class TestShare:
    def test_even_split(self, test_client, auth_headers):
        response = test_client.post(
            "/fares/share", json={"totalFare": 20, "memberCount": 4}, headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json() == {"totalFare": 20.0, "memberCount": 4, "sharePerPerson": 5.0}

    @pytest.mark.parametrize("members", [0, 9])
    def test_member_count_bounds(self, test_client, auth_headers, members):
        response = test_client.post(
            "/fares/share", json={"totalFare": 20, "memberCount": members}, headers=auth_headers
        )
        assert response.status_code == 422

    @pytest.mark.parametrize("total", ["1e307", "Infinity"])
    def test_rejects_out_of_range_total(self, test_client, auth_headers, total):
        response = test_client.post(
            "/fares/share",
            content=f'{{"totalFare": {total}, "memberCount": 2}}',
            headers={**auth_headers, "Content-Type": "application/json"},
        )
        assert response.status_code == 422


@pytest.mark.unit
class TestQuote:
    def test_routed_quote(self, test_client, auth_headers):
        response = test_client.post(
            "/fares/quote",
            json={"origin": DELHI, "destination": NOIDA, "groupName": "Marauders"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        body = response.json()
        quote = body["quote"]
        assert quote["tier"] == "routing"
        assert quote["fare"]["breakdown"]["totalFare"] == 33.25
        assert quote["fare"]["source"] == "estimate"
        assert quote["share"] == {"totalFare": 33.25, "memberCount": 4, "sharePerPerson": 8.31}
        assert quote["metrics"]["durationText"] == "25 min"
        assert body["session"]["fareInfo"] == {
            "totalFare": 33.25,
            "members": 4,
            "sharePerPerson": 8.31,
            "groupName": "Marauders",
        }
        assert body["session"]["tripData"]["destination"] == NOIDA

    def test_haversine_quote(self, make_app, failing_routing, auth_headers):
        from fastapi.testclient import TestClient

        client = TestClient(make_app(routing=failing_routing))

        response = client.post(
            "/fares/quote",
            json={"origin": DELHI, "destination": NOIDA, "memberCount": 1},
            headers=auth_headers,
        )

        quote = response.json()["quote"]
        assert quote["tier"] == "haversine"
        assert quote["fallbackReason"] == "OSRMServiceError"
        assert quote["metrics"]["durationMinutes"] == 40
        assert quote["fare"]["breakdown"]["totalFare"] == pytest.approx(51.69, abs=0.02)

    def test_default_quote_for_typed_place_names(self, test_client, auth_headers):
        response = test_client.post(
            "/fares/quote",
            json={"origin": {"name": "Hogwarts"}, "destination": NOIDA, "memberCount": 2},
            headers=auth_headers,
        )

        quote = response.json()["quote"]
        assert quote["tier"] == "default"
        assert quote["metrics"] is None
        assert quote["fare"]["breakdown"] == {
            "baseFare": 2.0,
            "distanceCharge": 15.0,
            "timeCharge": 3.0,
            "totalFare": 20.0,
        }
        assert quote["share"]["sharePerPerson"] == 10.0

    def test_quote_uses_ai_fare(self, make_app, stub_ai_factory, auth_headers):
        from fastapi.testclient import TestClient

        ai = stub_ai_factory(
            '{"baseFare": 2, "distanceCharge": 20, "timeCharge": 10, "totalFare": 32, '
            '"magicalNote": "Mind the gap!"}'
        )
        client = TestClient(make_app(ai=ai))

        response = client.post(
            "/fares/quote", json={"origin": DELHI, "destination": NOIDA}, headers=auth_headers
        )

        fare = response.json()["quote"]["fare"]
        assert fare["source"] == "ai"
        assert fare["note"] == "Mind the gap!"
        assert fare["breakdown"]["totalFare"] == 32.0

    def test_rejects_invalid_coordinates(self, test_client, auth_headers):
        response = test_client.post(
            "/fares/quote",
            json={"origin": {"name": "Nowhere", "lat": 123, "lng": 0}, "destination": NOIDA},
            headers=auth_headers,
        )
        assert response.status_code == 422


@pytest.mark.unit
class TestQuoteRateLimit:
    def test_twenty_first_request_returns_429(self, test_client, auth_headers):
        """Requests beyond 20/minute to AI-backed endpoints are rejected."""
        payload = {"origin": {"name": "Hogwarts"}, "destination": {"name": "Hogsmeade"}}

        for i in range(20):
            resp = test_client.post("/fares/quote", json=payload, headers=auth_headers)
            assert resp.status_code != 429, f"Request {i + 1} was rate limited"

        resp = test_client.post("/fares/quote", json=payload, headers=auth_headers)
        assert resp.status_code == 429
        assert resp.headers["retry-after"] == "60"

    def test_estimate_not_rate_limited(self, test_client, auth_headers):
        for _ in range(25):
            resp = test_client.post(
                "/fares/estimate", json={"distanceKm": 1, "durationMin": 1}, headers=auth_headers
            )
            assert resp.status_code == 200
