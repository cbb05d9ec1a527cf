# tests/test_catalogue_health.py
from safepin.core.catalogue import SafetyCategory


class TestCatalogue:
    def test_categories(self, client):
        response = client.get("/api/v1/categories")

        assert response.status_code == 200
        categories = response.json()["categories"]
        assert [c["value"] for c in categories] == [c.value for c in SafetyCategory]
        traffic = next(c for c in categories if c["value"] == "traffic")
        assert traffic["label"] == "교통안전"
        assert traffic["color"].startswith("#")
        assert traffic["education_links"]

    def test_location_types(self, client):
        response = client.get("/api/v1/location-types")

        values = [lt["value"] for lt in response.json()["location_types"]]
        assert values == ["school", "home", "village"]


class TestHealth:
    def test_live(self, client):
        assert client.get("/api/v1/health/live").json() == {"status": "ok"}

    def test_db(self, client):
        response = client.get("/api/v1/health/db")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestErrorShape:
    def test_unknown_route(self, client):
        response = client.get("/api/v1/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_wrong_method(self, client):
        response = client.delete("/api/v1/classes")

        assert response.status_code == 405
        assert "error" in response.json()
