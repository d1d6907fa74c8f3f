"""
Tests for the HTTP boundary.

Tests the full stack (routes → services → repositories → database) for the
copy-on-write endpoints.
"""

from sqlalchemy.exc import OperationalError

from recipe_sharing.models import Collection, CollectionRecipe, Recipe
from recipe_sharing.services.copy_service import CopyService
from recipe_sharing.services.ownership import OwnershipResolver


class TestHealth:
    """Tests for service endpoints"""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        """Root describes the service and how to identify the household"""
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Recipe Sharing API"
        assert data["household_header"] == "X-Household-ID"
        assert data["docs"] is None


class TestHouseholdHeader:
    """Tests for resolving the acting household"""

    def test_missing_header(self, client, shared_collection):
        """Request without household header is rejected"""
        response = client.post("/api/recipes/20/copy-for-edit")

        assert response.status_code == 401

    def test_malformed_header(self, client, shared_collection):
        """Non-numeric household id is rejected"""
        response = client.post(
            "/api/recipes/20/copy-for-edit", headers={"X-Household-ID": "smith"}
        )

        assert response.status_code == 401

    def test_unknown_household(self, client, shared_collection):
        """Household that doesn't exist is rejected"""
        response = client.post("/api/recipes/20/copy-for-edit", headers={"X-Household-ID": "404"})

        assert response.status_code == 401


class TestCopyForEditEndpoints:
    """Tests for single copy-for-edit endpoints"""

    def test_copy_recipe(self, client, shared_collection, household_headers):
        """Non-owner receives a copy"""
        response = client.post("/api/recipes/20/copy-for-edit", headers=household_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["copied"] is True
        assert data["new_id"] != 20

    def test_copy_own_recipe(self, client, shared_collection, owner_headers):
        """Owner receives its own id"""
        response = client.post("/api/recipes/20/copy-for-edit", headers=owner_headers)

        assert response.status_code == 200
        assert response.json() == {"copied": False, "new_id": 20}

    def test_copy_missing_recipe(self, client, shared_collection, household_headers):
        """Unknown recipe returns 404"""
        response = client.post("/api/recipes/12345/copy-for-edit", headers=household_headers)

        assert response.status_code == 404

    def test_copy_ingredient(self, client, shared_collection, household_headers):
        """Non-owner receives an ingredient copy"""
        response = client.post("/api/ingredients/30/copy-for-edit", headers=household_headers)

        assert response.status_code == 200
        assert response.json()["copied"] is True


class TestCascadeEndpoints:
    """Tests for cascade endpoints"""

    def test_cascade_recipe(self, client, shared_collection, household_headers):
        """Reference scenario over HTTP"""
        response = client.post(
            "/api/cascade/recipe",
            headers=household_headers,
            json={"collection_id": 10, "recipe_id": 20},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["actions_taken"] == [
            "collection_copied",
            "unsubscribed_from_original",
            "recipe_copied",
        ]
        assert data["new_collection_id"] != 10
        assert data["new_recipe_id"] != 20
        assert data["new_collection_slug"] == "weeknight-dinners"
        assert data["new_recipe_slug"] == "shortbread"

    def test_cascade_recipe_owner_gets_no_slugs(self, client, shared_collection, owner_headers):
        """Owner editing its own chain copies nothing"""
        response = client.post(
            "/api/cascade/recipe",
            headers=owner_headers,
            json={"collection_id": 10, "recipe_id": 20},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["actions_taken"] == []
        assert data["new_collection_slug"] is None
        assert data["new_recipe_slug"] is None

    def test_cascade_ingredient(self, client, shared_collection, household_headers):
        """Full cascade returns the ingredient copy"""
        response = client.post(
            "/api/cascade/ingredient",
            headers=household_headers,
            json={"collection_id": 10, "recipe_id": 20, "ingredient_id": 31},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["actions_taken"][-1] == "ingredient_copied"
        assert data["new_ingredient_id"] != 31

    def test_cascade_invalid_body(self, client, shared_collection, household_headers):
        """Missing ids fail validation"""
        response = client.post(
            "/api/cascade/recipe", headers=household_headers, json={"collection_id": 10}
        )

        assert response.status_code == 422

    def test_cascade_missing_collection(self, client, shared_collection, household_headers):
        """Unknown collection returns 404"""
        response = client.post(
            "/api/cascade/recipe",
            headers=household_headers,
            json={"collection_id": 12345, "recipe_id": 20},
        )

        assert response.status_code == 404


class TestCollectionCopyEndpoint:
    """Tests for copying a collection before editing it"""

    def test_copy_collection(self, client, db_session, shared_collection, household_headers):
        """Subscriber receives a private copy"""
        response = client.post("/api/collections/10/copy-for-edit", headers=household_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["copied"] is True
        assert db_session.get(Collection, data["new_id"]).household_id == 1

    def test_copy_own_collection(self, client, shared_collection, owner_headers):
        """Owner receives its own id"""
        response = client.post("/api/collections/10/copy-for-edit", headers=owner_headers)

        assert response.status_code == 200
        assert response.json() == {"copied": False, "new_id": 10}

    def test_copy_missing_collection(self, client, shared_collection, household_headers):
        """Unknown collection returns 404"""
        response = client.post("/api/collections/12345/copy-for-edit", headers=household_headers)

        assert response.status_code == 404


class TestSubscriptionEndpoints:
    """Tests for subscription endpoints"""

    def test_subscribe(self, client, shared_collection):
        """Household subscribes to a public collection"""
        response = client.post(
            "/api/collections/10/subscription", headers={"X-Household-ID": "2"}
        )

        assert response.status_code == 200
        assert response.json() == {"collection_id": 10, "subscribed": True, "changed": True}

    def test_subscribe_own_collection(self, client, shared_collection, owner_headers):
        """Owner subscribing to its own collection returns 400"""
        response = client.post("/api/collections/10/subscription", headers=owner_headers)

        assert response.status_code == 400

    def test_unsubscribe(self, client, shared_collection, household_headers):
        """Existing subscription is removed"""
        response = client.delete("/api/collections/10/subscription", headers=household_headers)

        assert response.status_code == 200
        assert response.json() == {"collection_id": 10, "subscribed": False, "changed": True}


class TestRecipeDeleteEndpoint:
    """Tests for the recipe delete endpoint"""

    def test_delete_foreign_recipe_forbidden(self, client, shared_collection, household_headers):
        """Non-owner without a collection context gets 403"""
        response = client.delete("/api/recipes/20", headers=household_headers)

        assert response.status_code == 403

    def test_remove_from_own_collection(self, client, db_session, own_collection, household_headers):
        """Non-owner removes a shared recipe from its own collection"""
        collection_id = own_collection.id

        response = client.delete(
            f"/api/recipes/20?collection_id={collection_id}", headers=household_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["deleted"] is False
        assert data["removed_from_collection_id"] == collection_id
        assert (
            db_session.query(CollectionRecipe)
            .filter(CollectionRecipe.collection_id == collection_id)
            .count()
            == 0
        )

    def test_delete_own_recipe(self, client, shared_collection, owner_headers):
        """Owner deletes its recipe and gets the cleanup summary"""
        response = client.delete("/api/recipes/20", headers=owner_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["deleted"] is True
        assert data["cleanup"]["deleted_recipe_ingredients"] == 2
        assert data["cleanup"]["deleted_orphaned_ingredients"] == [30, 31]


class TestDatabaseErrorResponses:
    """Tests for database failures reaching the HTTP boundary"""

    def test_storage_error_returns_500(
        self, client, db_session, shared_collection, household_headers, monkeypatch
    ):
        """Driver failure mid-cascade returns 500 and leaves no copy behind"""

        def copy_recipe(self, recipe, household_id):
            raise OperationalError("INSERT INTO recipes", {}, Exception("disk I/O error"))

        monkeypatch.setattr(CopyService, "copy_recipe", copy_recipe)

        response = client.post(
            "/api/cascade/recipe",
            headers=household_headers,
            json={"collection_id": 10, "recipe_id": 20},
        )

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal database error"}
        assert db_session.query(Collection).filter(Collection.household_id == 1).count() == 0

    def test_constraint_violation_returns_500(
        self, client, db_session, shared_collection, household_headers, monkeypatch
    ):
        """Copy conflict that survives every retry returns 500"""
        db_session.add(Recipe(household_id=1, parent_id=20, name="Shortbread"))
        db_session.commit()
        monkeypatch.setattr(
            OwnershipResolver, "find_existing_copy", lambda self, model, household_id, source_id: None
        )

        response = client.post("/api/recipes/20/copy-for-edit", headers=household_headers)

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal database error"}
        assert db_session.query(Recipe).filter(Recipe.household_id == 1).count() == 1
