"""
Tests for /hosts and /amenities endpoints.
"""

from modules.amenities.models import Amenity
from modules.hosts.models import Host


def make_host(**overrides) -> Host:
    data = {"id": "h-1", "username": "anna", "email": "anna@example.com", "name": "Anna"}
    data.update(overrides)
    return Host.model_validate(data)


class TestHosts:
    def test_list_by_name(self, client, host_repo):
        host_repo.list_hosts.return_value = [make_host(aboutMe="Superhost")]

        response = client.get("/hosts", params={"name": "ann"})

        assert response.status_code == 200
        assert response.json()[0]["aboutMe"] == "Superhost"
        host_repo.list_hosts.assert_called_once_with(name="ann")

    def test_create_missing_fields(self, client, host_repo, auth_headers):
        response = client.post("/hosts", json={"username": "anna"}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"message": "Missing required fields: email, name"}
        host_repo.create.assert_not_called()

    def test_update_missing_host(self, client, host_repo, auth_headers):
        host_repo.exists.return_value = False

        response = client.put("/hosts/h-9", json={"name": "Ann"}, headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"message": "Host not found"}

    def test_delete(self, client, host_repo, auth_headers):
        host_repo.delete.return_value = make_host()

        response = client.delete("/hosts/h-1", headers=auth_headers)

        assert response.json() == {"message": "Host anna deleted successfully"}


class TestAmenities:
    def test_create_duplicate(self, client, amenity_repo, auth_headers):
        amenity_repo.exists_by.return_value = True

        response = client.post("/amenities", json={"name": "Wifi"}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"message": "Amenity Wifi already exists"}

    def test_delete(self, client, amenity_repo, auth_headers):
        amenity_repo.delete.return_value = Amenity(id="a-1", name="Wifi")

        response = client.delete("/amenities/a-1", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Amenity Wifi deleted successfully"}

    def test_get_missing(self, client, amenity_repo):
        amenity_repo.get_by_id.return_value = None

        response = client.get("/amenities/a-9")

        assert response.status_code == 404
        assert response.json() == {"message": "Amenity not found"}
