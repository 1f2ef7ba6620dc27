"""
Integration tests for the colour and filament catalog endpoints
"""


class TestColourEndpoints:
    """Test /api/colours"""

    def test_create_and_list(self, client):
        response = client.post("/api/colours", json={"colour_name": "lavender"})

        assert response.status_code == 201
        colour_id = response.json()["id"]
        assert client.get("/api/colours").json() == [{"id": colour_id, "colour_name": "lavender"}]

    def test_empty_name_rejected(self, client):
        response = client.post("/api/colours", json={"colour_name": ""})

        assert response.status_code == 422

    def test_rename(self, client):
        colour_id = client.post("/api/colours", json={"colour_name": "pink"}).json()["id"]

        response = client.put(f"/api/colours/{colour_id}", json={"colour_name": "rose"})

        assert response.status_code == 200
        assert client.get("/api/colours").json()[0]["colour_name"] == "rose"

    def test_delete(self, client):
        colour_id = client.post("/api/colours", json={"colour_name": "green"}).json()["id"]

        assert client.delete(f"/api/colours/{colour_id}").status_code == 204
        assert client.get("/api/colours").json() == []

    def test_missing_colour(self, client):
        assert client.put("/api/colours/5", json={"colour_name": "x"}).status_code == 404
        assert client.delete("/api/colours/5").status_code == 404


class TestFilamentEndpoints:
    """Test /api/filaments"""

    def create_spool(self, client, **overrides):
        payload = {
            "size": 1000,
            "amount_used": 0,
            "date_of_addition": "2024-01-05",
            "material": "PLA",
            "colour_name": "black",
        }
        payload.update(overrides)
        response = client.post("/api/filaments", json=payload)
        assert response.status_code == 201
        return response.json()["id"]

    def test_create_and_list(self, client):
        spool_id = self.create_spool(client)

        spools = client.get("/api/filaments").json()

        assert spools == [{
            "id": spool_id,
            "size": 1000,
            "amount_used": 0,
            "date_of_addition": "2024-01-05",
            "material": "PLA",
            "colour_name": "black",
        }]

    def test_size_must_be_positive(self, client):
        response = client.post("/api/filaments", json={"size": 0, "material": "PLA", "colour_name": "black"})

        assert response.status_code == 422

    def test_book_usage_with_full_put(self, client):
        spool_id = self.create_spool(client)
        spool = client.get("/api/filaments").json()[0]
        spool["amount_used"] = 285

        response = client.put(f"/api/filaments/{spool_id}", json=spool)

        assert response.status_code == 200
        assert client.get("/api/filaments").json()[0]["amount_used"] == 285

    def test_body_id_does_not_override_path(self, client):
        first = self.create_spool(client, colour_name="black")
        second = self.create_spool(client, colour_name="blue")

        client.put(f"/api/filaments/{first}", json={
            "id": second, "size": 500, "amount_used": 10, "material": "PETG", "colour_name": "black",
        })

        spools = {s["id"]: s for s in client.get("/api/filaments").json()}
        assert spools[first]["size"] == 500
        assert spools[second]["size"] == 1000

    def test_delete(self, client):
        spool_id = self.create_spool(client)

        assert client.delete(f"/api/filaments/{spool_id}").status_code == 204
        assert client.get("/api/filaments").json() == []

    def test_missing_spool(self, client):
        response = client.delete("/api/filaments/42")

        assert response.status_code == 404
        assert response.json()["details"] == {"resource_type": "filament", "resource_id": 42}
