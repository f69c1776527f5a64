"""MacroSplit value object - macronutrient distribution."""

from dataclasses import dataclass

from .units import KCAL_PER_G_CARBS, KCAL_PER_G_FAT, KCAL_PER_G_PROTEIN


@dataclass(frozen=True)
class MacroSplit:
    """Macronutrient distribution in grams.

    Represents daily target for protein, carbohydrates, and fat.
    Uses standard calorie conversion: protein 4 kcal/g, carbs 4 kcal/g,
    fat 9 kcal/g.

    Attributes:
        protein_g: Protein in grams (non-negative)
        carbs_g: Carbohydrates in grams (non-negative)
        fat_g: Fat in grams (non-negative)
    """

    protein_g: int
    carbs_g: int
    fat_g: int

    def __post_init__(self) -> None:
        """Validate macronutrients are non-negative.

        Raises:
            ValueError: If any macronutrient is negative
        """
        if self.protein_g < 0:
            raise ValueError(
                f"Protein must be non-negative, got {self.protein_g}"
            )
        if self.carbs_g < 0:
            raise ValueError(
                f"Carbs must be non-negative, got {self.carbs_g}"
            )
        if self.fat_g < 0:
            raise ValueError(
                f"Fat must be non-negative, got {self.fat_g}"
            )

    def total_calories(self) -> int:
        """Calculate total calories from macronutrients.

        Returns:
            int: Total calories (protein x 4 + carbs x 4 + fat x 9)

        Example:
            >>> split = MacroSplit(protein_g=126, carbs_g=161, fat_g=47)
            >>> split.total_calories()
            1571
        """
        return (
            self.protein_g * KCAL_PER_G_PROTEIN
            + self.carbs_g * KCAL_PER_G_CARBS
            + self.fat_g * KCAL_PER_G_FAT
        )

    def protein_percentage(self) -> float:
        """Protein percentage of total calories (0-100)."""
        total = self.total_calories()
        if total == 0:
            return 0.0
        return (self.protein_g * KCAL_PER_G_PROTEIN) / total * 100

    def carbs_percentage(self) -> float:
        """Carbs percentage of total calories (0-100)."""
        total = self.total_calories()
        if total == 0:
            return 0.0
        return (self.carbs_g * KCAL_PER_G_CARBS) / total * 100

    def fat_percentage(self) -> float:
        """Fat percentage of total calories (0-100)."""
        total = self.total_calories()
        if total == 0:
            return 0.0
        return (self.fat_g * KCAL_PER_G_FAT) / total * 100

    def __str__(self) -> str:
        return f"{self.protein_g}P / {self.carbs_g}C / {self.fat_g}F"
