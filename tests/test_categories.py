"""
Testes dos endpoints de categorias
"""


class TestCategories:

    def test_list_empty(self, client):
        response = client.get("/categories")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_and_list(self, client):
        response = client.post("/categories", json={"name": "RPG"})
        assert response.status_code == 201
        assert response.content == b""

        categories = client.get("/categories").json()
        assert len(categories) == 1
        assert categories[0]["name"] == "RPG"
        assert isinstance(categories[0]["id"], int)

    def test_list_keeps_insertion_order(self, client):
        for name in ["RPG", "Estratégia", "Party"]:
            client.post("/categories", json={"name": name})
        names = [c["name"] for c in client.get("/categories").json()]
        assert names == ["RPG", "Estratégia", "Party"]

    def test_missing_name(self, client):
        response = client.post("/categories", json={})
        assert response.status_code == 400

    def test_empty_name(self, client):
        response = client.post("/categories", json={"name": ""})
        assert response.status_code == 400

    def test_duplicate_name(self, client):
        assert client.post("/categories", json={"name": "RPG"}).status_code == 201
        response = client.post("/categories", json={"name": "RPG"})
        assert response.status_code == 409
        assert len(client.get("/categories").json()) == 1

    def test_duplicate_check_is_case_sensitive(self, client):
        assert client.post("/categories", json={"name": "RPG"}).status_code == 201
        assert client.post("/categories", json={"name": "rpg"}).status_code == 201

    def test_whitespace_name_is_accepted(self, client):
        response = client.post("/categories", json={"name": "   "})
        assert response.status_code == 201
        assert client.get("/categories").json()[0]["name"] == "   "
