"""BMRService - Basal Metabolic Rate calculation."""

import logging
from typing import Union

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.biometric_profile import BiometricProfile
from ..core.value_objects.bmr import BMR
from ..core.value_objects.sex import Sex
from ..core.value_objects.validation import (
    MAX_AGE_YEARS,
    MAX_HEIGHT_CM,
    MAX_WEIGHT_KG,
    coerce_enum,
    require_positive,
)

logger = logging.getLogger(__name__)


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    The Mifflin-St Jeor equation is considered the most accurate formula
    for BMR calculation in normal-weight and overweight individuals.

    Formula:
        Men:   BMR = 10 x weight(kg) + 6.25 x height(cm) - 5 x age + 5
        Women: BMR = 10 x weight(kg) + 6.25 x height(cm) - 5 x age - 161
        Other: BMR = 10 x weight(kg) + 6.25 x height(cm) - 5 x age - 78

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def compute(
        self,
        sex: Union[Sex, str],
        weight_kg: float,
        height_cm: float,
        age_years: int,
    ) -> float:
        """Compute BMR in kcal/day from raw inputs.

        Args:
            sex: male / female / other
            weight_kg: Body weight in kilograms
            height_cm: Height in centimeters
            age_years: Age in years

        Returns:
            float: Estimated BMR in kcal/day

        Raises:
            InvalidInputError: If a value is non-positive or sex is unknown

        Example:
            >>> BMRService().compute(Sex.FEMALE, 70.0, 165.0, 30)
            1420.25
        """
        sex = coerce_enum(Sex, sex, "sex")
        require_positive(weight_kg, "weight_kg", MAX_WEIGHT_KG)
        require_positive(height_cm, "height_cm", MAX_HEIGHT_CM)
        require_positive(age_years, "age_years", MAX_AGE_YEARS)

        # Base calculation (common for all sexes)
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age_years

        return base + sex.bmr_offset()

    def calculate(self, biometric: BiometricProfile) -> BMR:
        """Calculate BMR from a biometric profile.

        Args:
            biometric: User biometric data (weight, height, age, sex)

        Returns:
            BMR: Calculated basal metabolic rate in kcal/day
        """
        value = self.compute(
            sex=biometric.sex,
            weight_kg=biometric.weight_kg,
            height_cm=biometric.height_cm,
            age_years=biometric.age_years,
        )
        logger.debug("bmr.calculated", extra={"sex": biometric.sex.value, "bmr": value})
        return BMR(value=value)
