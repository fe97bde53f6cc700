"""Static nutrition reference table for common Indian dishes.

Entries are matched in order, so an entry listed earlier wins when keywords
of several entries appear in the same description.
"""

from collections.abc import Iterable

from beefup.domain.foods import FoodReferenceEntry


def _entry(
    name: str,
    calories: float,
    protein: float,
    serving: str,
    keywords: Iterable[str],
) -> FoodReferenceEntry:
    return FoodReferenceEntry(
        display_name=name,
        calories_per_serving=calories,
        protein_grams_per_serving=protein,
        serving_description=serving,
        match_keywords=tuple(keywords),
    )


REFERENCE_TABLE: tuple[FoodReferenceEntry, ...] = (
    # Breads
    _entry("Roti / Chapati", 104, 3, "1 medium", ["roti", "chapati", "phulka", "bread"]),
    _entry("Naan", 260, 9, "1 medium", ["naan", "butter naan"]),
    _entry("Paratha (Plain)", 180, 5, "1 medium", ["paratha", "plain paratha"]),
    _entry("Aloo Paratha", 290, 6, "1 medium", ["aloo paratha", "potato paratha"]),
    _entry("Puri", 101, 1, "1 medium", ["puri", "poori"]),
    # Rice
    _entry("White Rice", 130, 2.7, "1 cup (cooked)", ["rice", "white rice", "chawal"]),
    _entry("Jeera Rice", 180, 3, "1 cup", ["jeera rice", "cumin rice"]),
    _entry("Chicken Biryani", 290, 15, "1 cup", ["chicken biryani", "biryani"]),
    _entry("Veg Biryani", 200, 5, "1 cup", ["veg biryani", "vegetable biryani"]),
    _entry("Curd Rice", 210, 6, "1 cup", ["curd rice", "thayir sadam"]),
    # Lentils
    _entry("Dal Tadka", 180, 10, "1 cup", ["dal", "dal tadka", "yellow dal"]),
    _entry("Dal Makhani", 280, 12, "1 cup", ["dal makhani", "black dal"]),
    _entry("Sambar", 130, 6, "1 cup", ["sambar"]),
    _entry("Rajma", 240, 14, "1 cup", ["rajma", "kidney beans"]),
    _entry("Chana Masala", 260, 15, "1 cup", ["chana", "chole", "chana masala"]),
    # Veg curries
    _entry(
        "Paneer Butter Masala",
        350,
        12,
        "1 cup",
        ["paneer", "paneer butter masala", "butter paneer"],
    ),
    _entry("Palak Paneer", 280, 16, "1 cup", ["palak paneer"]),
    _entry("Aloo Gobi", 160, 4, "1 cup", ["aloo gobi", "potato cauliflower"]),
    _entry("Bhindi Masala", 140, 3, "1 cup", ["bhindi", "okra"]),
    _entry("Mix Veg", 160, 4, "1 cup", ["mix veg", "mixed vegetable"]),
    # Non-veg
    _entry("Butter Chicken", 400, 25, "1 cup", ["butter chicken", "murgh makhani"]),
    _entry("Chicken Curry", 280, 22, "1 cup", ["chicken curry"]),
    _entry("Egg Curry", 220, 14, "2 eggs + gravy", ["egg curry", "anda curry"]),
    _entry("Fish Curry", 250, 20, "1 cup", ["fish curry"]),
    # Breakfast and snacks
    _entry("Idli", 39, 2, "1 piece", ["idli"]),
    _entry("Dosa (Plain)", 133, 4, "1 medium", ["dosa", "plain dosa"]),
    _entry("Masala Dosa", 350, 8, "1 medium", ["masala dosa"]),
    _entry("Poha", 250, 5, "1 cup", ["poha"]),
    _entry("Upma", 220, 6, "1 cup", ["upma"]),
    _entry("Samosa", 260, 4, "1 piece", ["samosa"]),
    _entry("Vada Pav", 300, 6, "1 piece", ["vada pav"]),
    _entry("Boiled Egg", 78, 6, "1 large", ["egg", "boiled egg"]),
    _entry("Omelette", 154, 12, "2 eggs", ["omelette", "omlet"]),
    # Drinks
    _entry("Masala Chai", 100, 3, "1 cup", ["chai", "tea", "masala chai"]),
    _entry("Lassi (Sweet)", 200, 6, "1 glass", ["lassi"]),
    _entry("Buttermilk (Chaas)", 40, 2, "1 glass", ["chaas", "buttermilk"]),
)


def validate_table(table: Iterable[FoodReferenceEntry]) -> None:
    """Raise ValueError if any entry breaks the table invariants."""
    for entry in table:
        if not entry.match_keywords:
            raise ValueError(f"{entry.display_name}: no match keywords")
        if any(
            not keyword or keyword != keyword.strip().lower()
            for keyword in entry.match_keywords
        ):
            raise ValueError(f"{entry.display_name}: keywords must be lowercase")
        if entry.calories_per_serving < 0 or entry.protein_grams_per_serving < 0:
            raise ValueError(f"{entry.display_name}: negative nutrition values")


validate_table(REFERENCE_TABLE)
