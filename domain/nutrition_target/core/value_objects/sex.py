"""Sex value object - selects the Mifflin-St Jeor offset and calorie floor."""

from enum import Enum
from types import MappingProxyType


class Sex(str, Enum):
    """Sex recorded for the user.

    - MALE / FEMALE: standard Mifflin-St Jeor offsets
    - OTHER: arithmetic midpoint of the male and female offsets
    """

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    def bmr_offset(self) -> float:
        """Get the sex-specific constant added to the BMR base.

        Example:
            >>> Sex.OTHER.bmr_offset()
            -78.0
        """
        return _BMR_OFFSETS[self]

    def calorie_floor(self) -> int:
        """Get the minimum safe daily intake in kcal.

        Example:
            >>> Sex.FEMALE.calorie_floor()
            1200
        """
        return _CALORIE_FLOORS[self]


_BMR_OFFSETS = MappingProxyType(
    {
        Sex.MALE: 5.0,
        Sex.FEMALE: -161.0,
        Sex.OTHER: -78.0,
    }
)

_CALORIE_FLOORS = MappingProxyType(
    {
        Sex.MALE: 1500,
        Sex.FEMALE: 1200,
        Sex.OTHER: 1500,
    }
)
