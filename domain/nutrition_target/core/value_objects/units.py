"""Physical constants and unit conversions shared by the calculators."""

# Mass
LB_PER_KG = 2.20462

# Energy stored in one pound of body fat
KCAL_PER_LB_FAT = 3500.0
DAYS_PER_WEEK = 7

# Atwater factors (kcal per gram)
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


def kg_to_lb(kg: float) -> float:
    """Convert kilograms to pounds."""
    return kg * LB_PER_KG


def lb_to_kg(lb: float) -> float:
    """Convert pounds to kilograms."""
    return lb / LB_PER_KG
