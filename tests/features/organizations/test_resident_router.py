"""Tests for the resident organization router."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from org_residency.core.exceptions import GroupStoreError
from org_residency.features.organizations.routers import (
    get_resident_organization_resolver,
    resident_organization_router,
)

from tests.conftest import InMemoryGroupStore


@pytest.fixture
def make_client(make_resolver):
    """Build a test client around a resolver using the given group store."""
    def _make(group_store):
        app = FastAPI()
        app.include_router(resident_organization_router)
        app.dependency_overrides[get_resident_organization_resolver] = lambda: make_resolver(group_store)
        return TestClient(app)
    return _make


class TestResidentOrganizationRouter:
    """Test the resident organization endpoint."""

    def test_resident_organization_found(self, make_client):
        """Test a successful resolution."""
        client = make_client(InMemoryGroupStore({"t1": ["g-1"]}))

        response = client.get("/organizations/org3/groups/g-1/resident-organization")

        assert response.status_code == 200
        assert response.json() == {
            "group_id": "g-1",
            "accessed_organization_id": "org3",
            "resident_organization_id": "org1",
            "found": True,
        }

    def test_resident_organization_not_found(self, make_client):
        """Test that no resident organization is not an error."""
        client = make_client(InMemoryGroupStore({}))

        response = client.get("/organizations/org3/groups/g-1/resident-organization")

        assert response.status_code == 200
        body = response.json()
        assert body["resident_organization_id"] is None
        assert body["found"] is False

    def test_resolution_error(self, make_client):
        """Test that collaborator failures map to the standard error body."""
        client = make_client(InMemoryGroupStore(
            {}, exists_errors={"t2": GroupStoreError("realm unavailable")}
        ))

        response = client.get("/organizations/org3/groups/g-1/resident-organization")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "RESOLVING_GROUP_RESIDENT_ORGANIZATION_FAILED"
        assert error["type"] == "ResolutionError"
        assert error["details"]["group_id"] == "g-1"

    def test_blank_group_id(self, make_client):
        """Test that a blank group ID is rejected."""
        client = make_client(InMemoryGroupStore({}))

        response = client.get("/organizations/org3/groups/%20/resident-organization")

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["type"] == "ValidationError"
        assert error["code"] == "ValidationError"
        assert "Group ID" in error["message"]

    def test_dependency_must_be_provided(self):
        """Test that the placeholder dependency is not usable as-is."""
        app = FastAPI()
        app.include_router(resident_organization_router)
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/organizations/org3/groups/g-1/resident-organization")

        assert response.status_code == 500
