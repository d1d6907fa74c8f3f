# Import all model classes so they are registered with SQLAlchemy metadata
from recipe_sharing.models.base import Base
from recipe_sharing.models.household import Household
from recipe_sharing.models.collection import Collection
from recipe_sharing.models.recipe import Recipe
from recipe_sharing.models.ingredient import Ingredient
from recipe_sharing.models.collection_recipe import CollectionRecipe
from recipe_sharing.models.recipe_ingredient import RecipeIngredient
from recipe_sharing.models.subscription import Subscription

__all__ = [
    "Base",
    "Household",
    "Collection",
    "Recipe",
    "Ingredient",
    "CollectionRecipe",
    "RecipeIngredient",
    "Subscription",
]
