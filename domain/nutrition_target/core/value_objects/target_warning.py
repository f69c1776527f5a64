"""TargetWarning value object - non-fatal flags attached to a target."""

from enum import Enum


class TargetWarning(str, Enum):
    """Structured warnings surfaced alongside a still-valid target.

    - BELOW_SAFE_MINIMUM: the sex-specific calorie floor was applied
    - DEFICIT_CAPPED: the requested pace deficit was reduced by the
      safety cap for the remaining amount to lose
    """

    BELOW_SAFE_MINIMUM = "below_safe_minimum"
    DEFICIT_CAPPED = "deficit_capped"
