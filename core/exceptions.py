"""
Recipe Service Exceptions
Domain errors raised by the store and services, mapped to HTTP responses in main
"""

import uuid
from typing import Union


class RecipeNotFoundError(Exception):
    """Raised when a recipe id does not exist in the store"""

    def __init__(self, recipe_id: Union[uuid.UUID, str]):
        self.recipe_id = recipe_id
        super().__init__(f"Recipe not found with id: {recipe_id}")
