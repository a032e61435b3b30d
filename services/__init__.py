"""Services package - Business logic layer"""

from services.user_service import UserService
from services.meal_service import MealService

# Note: credentials and metrics contain utility functions, not classes

__all__ = [
    "UserService",
    "MealService",
]
