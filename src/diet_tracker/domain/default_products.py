"""Shared catalog products visible to every user."""


def _product(  # noqa: PLR0913
    name: str,
    emoji: str,
    category: str,
    serving: tuple[float, str],
    calories: float,
    protein: float,
    carbs: float,
    fat: float,
    fiber: float,
    sugar: float,
) -> dict[str, object]:
    return {
        "name": name,
        "emoji": emoji,
        "category": category,
        "serving_size": serving[0],
        "serving_unit": serving[1],
        "calories": calories,
        "protein": protein,
        "carbs": carbs,
        "fat": fat,
        "fiber": fiber,
        "sugar": sugar,
    }


DEFAULT_PRODUCTS: tuple[dict[str, object], ...] = (
    _product("Apple", "🍎", "Fruit", (182, "g"), 95, 0.5, 25, 0.3, 4.4, 19),
    _product("Banana", "🍌", "Fruit", (118, "g"), 105, 1.3, 27, 0.4, 3.1, 14),
    _product("Orange", "🍊", "Fruit", (131, "g"), 62, 1.2, 15, 0.2, 3.1, 12),
    _product("Strawberries", "🍓", "Fruit", (150, "g"), 49, 1, 12, 0.5, 3, 7),
    _product("Blueberries", "🫐", "Fruit", (150, "g"), 86, 1.1, 22, 0.5, 3.6, 15),
    _product("Avocado", "🥑", "Fruit", (150, "g"), 240, 3, 13, 22, 10, 1),
    _product("Scrambled Eggs", "🍳", "Meal", (100, "g"), 147, 10, 2, 11, 0, 1),
    _product("Oatmeal", "🥣", "Meal", (234, "g"), 158, 6, 27, 3, 4, 1),
    _product("Greek Yogurt", "🥛", "Meal", (200, "g"), 146, 20, 8, 4, 0, 6),
    _product(
        "Grilled Chicken Breast", "🍗", "Meal", (150, "g"), 248, 46, 0, 5, 0, 0
    ),
    _product("Salmon Fillet", "🐟", "Meal", (170, "g"), 350, 39, 0, 21, 0, 0),
    _product(
        "Spaghetti Bolognese", "🍝", "Meal", (350, "g"), 450, 22, 52, 16, 4, 8
    ),
    _product("Caesar Salad", "🥗", "Meal", (200, "g"), 220, 10, 12, 16, 3, 3),
    _product("Pizza Slice", "🍕", "Meal", (107, "g"), 285, 12, 36, 10, 2, 4),
    _product("Burger", "🍔", "Meal", (200, "g"), 540, 28, 40, 29, 2, 8),
    _product("Vegetable Curry", "🍛", "Meal", (300, "g"), 280, 8, 35, 12, 6, 8),
    _product("Quinoa Bowl", "🥗", "Meal", (250, "g"), 320, 12, 48, 10, 6, 4),
    _product("Mixed Nuts", "🥜", "Snack", (40, "g"), 240, 8, 8, 21, 3, 2),
    _product("Protein Bar", "🍫", "Snack", (60, "g"), 220, 20, 22, 7, 3, 8),
    _product("Dark Chocolate", "🍫", "Snack", (30, "g"), 170, 2, 13, 12, 3, 7),
    _product("Popcorn", "🍿", "Snack", (30, "g"), 120, 4, 22, 2, 4, 0),
    _product("Black Coffee", "☕", "Coffee", (240, "ml"), 2, 0.3, 0, 0, 0, 0),
    _product("Latte", "☕", "Coffee", (350, "ml"), 150, 8, 15, 6, 0, 13),
    _product("Cappuccino", "☕", "Coffee", (240, "ml"), 80, 5, 8, 3, 0, 7),
    _product("Green Tea", "🍵", "Coffee", (240, "ml"), 2, 0, 0, 0, 0, 0),
    _product("Orange Juice", "🍊", "Coffee", (240, "ml"), 110, 2, 26, 0, 0, 21),
    _product("Protein Shake", "🥤", "Coffee", (350, "ml"), 200, 25, 10, 5, 2, 5),
    _product("White Rice", "🍚", "Custom", (150, "g"), 206, 4, 45, 0.4, 0.6, 0),
    _product("Boiled Egg", "🥚", "Custom", (50, "g"), 78, 6, 0.6, 5, 0, 0.6),
    _product("Broccoli", "🥦", "Custom", (100, "g"), 34, 2.8, 7, 0.4, 2.6, 1.7),
    _product("Sweet Potato", "🍠", "Custom", (150, "g"), 129, 2, 30, 0.1, 4, 6),
    _product("Bread Slice", "🍞", "Custom", (30, "g"), 80, 3, 15, 1, 1, 2),
)
