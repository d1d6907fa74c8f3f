"""Closed set of events recorded by a copy-on-write cascade."""

from enum import Enum as PyEnum


class CascadeAction(str, PyEnum):
    """
    Actions a cascade can take, in the order they are recorded.

    - COLLECTION_COPIED: the household received its own copy of the collection
    - UNSUBSCRIBED_FROM_ORIGINAL: the subscription to the source collection was dropped
    - RECIPE_COPIED: the household received its own copy of the recipe
    - INGREDIENT_COPIED: the household received its own copy of the ingredient
    """

    COLLECTION_COPIED = "collection_copied"
    UNSUBSCRIBED_FROM_ORIGINAL = "unsubscribed_from_original"
    RECIPE_COPIED = "recipe_copied"
    INGREDIENT_COPIED = "ingredient_copied"
