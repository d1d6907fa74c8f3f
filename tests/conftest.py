import os

# Settings require DATABASE_URL at import time; tests use their own engine below
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from recipe_sharing.database import get_db, enable_sqlite_foreign_keys
# Import all model classes to ensure they're registered with SQLAlchemy
from recipe_sharing.models import (
    Base,
    Household,
    Collection,
    Recipe,
    Ingredient,
    CollectionRecipe,
    RecipeIngredient,
    Subscription,
)
# Import FastAPI app AFTER model imports
from recipe_sharing.main import app

# Test database (SQLite in-memory for speed)
# Use StaticPool to ensure all connections share the same in-memory database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
event.listen(engine, "connect", enable_sqlite_foreign_keys)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Reference scenario ids
HOUSEHOLD_ID = 1
OWNER_HOUSEHOLD_ID = 99
BYSTANDER_HOUSEHOLD_ID = 2
SHARED_COLLECTION_ID = 10
SHARED_RECIPE_ID = 20
FLOUR_ID = 30
BUTTER_ID = 31


@pytest.fixture(scope="function")
def db_session():
    """Create fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """FastAPI test client with test database"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def households(db_session):
    """Acting household (1), owner of the shared data (99) and a bystander (2)"""
    rows = [
        Household(id=HOUSEHOLD_ID, name="Smith Family"),
        Household(id=OWNER_HOUSEHOLD_ID, name="Test Kitchen"),
        Household(id=BYSTANDER_HOUSEHOLD_ID, name="Jones Family"),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows


@pytest.fixture
def shared_collection(db_session, households):
    """
    Public collection 10 owned by household 99.

    Holds recipe 20, whose ingredient list references ingredients 30 and 31
    (both owned by 99). Household 1 is subscribed to the collection.
    """
    db_session.add_all(
        [
            Collection(
                id=SHARED_COLLECTION_ID,
                household_id=OWNER_HOUSEHOLD_ID,
                title="Weeknight Dinners",
                subtitle="Quick meals",
                public=True,
                url_slug="weeknight-dinners",
            ),
            Recipe(
                id=SHARED_RECIPE_ID,
                household_id=OWNER_HOUSEHOLD_ID,
                name="Shortbread",
                prep_time=15,
                cook_time=25,
                url_slug="shortbread",
            ),
            Ingredient(id=FLOUR_ID, household_id=OWNER_HOUSEHOLD_ID, name="Flour"),
            Ingredient(id=BUTTER_ID, household_id=OWNER_HOUSEHOLD_ID, name="Butter", fresh=True),
        ]
    )
    db_session.flush()
    db_session.add_all(
        [
            CollectionRecipe(collection_id=SHARED_COLLECTION_ID, recipe_id=SHARED_RECIPE_ID),
            RecipeIngredient(
                recipe_id=SHARED_RECIPE_ID, ingredient_id=FLOUR_ID, quantity="300", unit="g"
            ),
            RecipeIngredient(
                recipe_id=SHARED_RECIPE_ID,
                ingredient_id=BUTTER_ID,
                quantity="200",
                unit="g",
                primary_ingredient=True,
            ),
            Subscription(household_id=HOUSEHOLD_ID, collection_id=SHARED_COLLECTION_ID),
        ]
    )
    db_session.commit()
    return db_session.get(Collection, SHARED_COLLECTION_ID)


@pytest.fixture
def own_collection(db_session, shared_collection):
    """Collection owned by household 1 that also lists shared recipe 20"""
    collection = Collection(household_id=HOUSEHOLD_ID, title="Favourites", public=False)
    db_session.add(collection)
    db_session.flush()
    db_session.add(CollectionRecipe(collection_id=collection.id, recipe_id=SHARED_RECIPE_ID))
    db_session.commit()
    return collection


@pytest.fixture
def bystander_collection(db_session, shared_collection):
    """Collection owned by household 2 that also lists shared recipe 20"""
    collection = Collection(household_id=BYSTANDER_HOUSEHOLD_ID, title="Baking", public=True)
    db_session.add(collection)
    db_session.flush()
    db_session.add(CollectionRecipe(collection_id=collection.id, recipe_id=SHARED_RECIPE_ID))
    db_session.commit()
    return collection


@pytest.fixture
def household_headers():
    """Request headers identifying household 1"""
    return {"X-Household-ID": str(HOUSEHOLD_ID)}


@pytest.fixture
def owner_headers():
    """Request headers identifying household 99"""
    return {"X-Household-ID": str(OWNER_HOUSEHOLD_ID)}
