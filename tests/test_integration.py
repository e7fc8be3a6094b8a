"""
Integration tests against a live Pritunl server.

Set PRITUNL_HOST, PRITUNL_TOKEN and PRITUNL_SECRET to run them; set
PRITUNL_INSECURE=1 for servers with a self-signed certificate.
"""

import os
import uuid

import pytest

from pritunl_client import Credentials, PritunlClient, RequestError

pytestmark = pytest.mark.skipif(
    not all(os.environ.get(name) for name in ("PRITUNL_HOST", "PRITUNL_TOKEN", "PRITUNL_SECRET")),
    reason="PRITUNL_HOST, PRITUNL_TOKEN and PRITUNL_SECRET are not set"
)


class TestIntegration:
    """Integration tests with a Pritunl server."""

    @pytest.fixture
    def client(self):
        """Create authenticated client."""
        with PritunlClient.from_env() as client:
            yield client

    @pytest.fixture
    def organization(self, client):
        """Create a throwaway organization."""
        org = {}
        client.post("/organization", payload={"name": f"test-{uuid.uuid4().hex[:8]}"}, out=org)

        yield org

        client.delete(f"/organization/{org['id']}")

    def test_list_organizations(self, client):
        """Test authenticated listing."""
        organizations = []
        response = client.get("/organization", out=organizations)

        assert response.status_code == 200
        assert isinstance(organizations, list)

    def test_wrong_secret(self, client):
        """Test a bad signature is rejected with 401."""
        credentials = client.credentials
        wrong = Credentials(credentials.host, credentials.token, "wrong-secret")

        with PritunlClient(wrong, verify_tls=client.config['verify_tls']) as wrong_client:
            response = wrong_client.get("/organization", out=[])

        assert response.status_code == 401

    def test_missing_organization(self, client):
        """Test unknown resources come back as 404 without raising."""
        out = {}
        response = client.get(f"/organization/{'0' * 24}", out=out)

        assert response.status_code == 404
        assert out == {}

    def test_user_lifecycle(self, client, organization):
        """Test create, read, update and delete of a user."""
        org_id = organization["id"]

        created = []
        client.post(f"/user/{org_id}", payload={"name": "integration-user"}, out=created)
        user_id = created[0]["id"]

        updated = {}
        client.put(
            f"/user/{org_id}/{user_id}",
            payload={"name": "integration-user", "disabled": True},
            out=updated
        )
        assert updated["disabled"] is True

        fetched = {}
        client.get(f"/user/{org_id}/{user_id}", out=fetched)
        assert fetched["name"] == "integration-user"

        response = client.delete(f"/user/{org_id}/{user_id}")
        assert response.status_code == 200

    def test_bad_request(self, client):
        """Test validation failures raise RequestError."""
        with pytest.raises(RequestError) as excinfo:
            client.post("/organization", payload={"name": ""}, out={})

        assert excinfo.value.status_code is not None
