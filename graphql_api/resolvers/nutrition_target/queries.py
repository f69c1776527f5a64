"""Query resolvers for nutrition target domain.

- nutritionTarget: calculate calories, macros and time to goal
"""

import logging

import strawberry

from application.nutrition_target.queries.calculate_target import (
    CalculateTargetQuery,
    CalculateTargetQueryHandler,
)
from domain.nutrition_target.core.value_objects.biometric_profile import (
    BiometricProfile,
)
from domain.nutrition_target.core.value_objects.goal_profile import GoalProfile
from domain.nutrition_target.core.value_objects.nutrition_target import (
    NutritionTarget,
)
from graphql_api.types_nutrition_target import (
    NutritionTargetInput,
    NutritionTargetType,
    TargetWarningEnum,
)

logger = logging.getLogger(__name__)


# ============================================
# HELPER FUNCTIONS
# ============================================


def map_input_to_domain(input: NutritionTargetInput) -> CalculateTargetQuery:
    """Map GraphQL input to the application query.

    Raises:
        InvalidInputError: If the domain rejects a value
    """
    biometric = BiometricProfile(
        sex=input.biometric.sex.value,
        age_years=input.biometric.age_years,
        weight_kg=input.biometric.weight_kg,
        height_cm=input.biometric.height_cm,
        activity_level=input.biometric.activity_level.value,
    )
    goal = GoalProfile(
        weight_goal=input.goal.weight_goal.value,
        goal_pace=input.goal.goal_pace.value,
        target_weight_kg=input.goal.target_weight_kg,
    )
    return CalculateTargetQuery(biometric=biometric, goal=goal, today=input.today)


def map_domain_target_to_graphql(target: NutritionTarget) -> NutritionTargetType:
    """Map domain NutritionTarget to GraphQL NutritionTargetType."""
    return NutritionTargetType(
        daily_calories=target.daily_calories,
        protein_grams=target.protein_grams,
        carbs_grams=target.carbs_grams,
        fat_grams=target.fat_grams,
        weeks_to_goal=target.weeks_to_goal,
        estimated_goal_date=target.estimated_goal_date,
        bmr=target.bmr,
        tdee=target.tdee,
        adjustment=target.adjustment,
        weight_difference_kg=target.weight_difference_kg,
        weight_difference_lbs=target.weight_difference_lbs,
        macro_strategy=target.macro_strategy,
        warnings=[TargetWarningEnum(w.value) for w in target.warnings],
        below_safe_minimum=target.below_safe_minimum,
    )


# ============================================
# QUERY RESOLVERS
# ============================================


@strawberry.type
class NutritionTargetQueries:
    """GraphQL queries for nutrition target domain."""

    @strawberry.field
    def nutrition_target(
        self,
        info: strawberry.types.Info,
        input: NutritionTargetInput,
    ) -> NutritionTargetType:
        """Calculate a nutrition target.

        Args:
            info: Strawberry field info (injected)
            input: Biometric and goal inputs

        Returns:
            NutritionTargetType with calories, macros and goal date

        Raises:
            Exception: If the orchestrator is missing from context
            InvalidInputError: If inputs are physically impossible

        Example:
            query {
              nutritionTarget(
                input: {
                  biometric: {
                    sex: FEMALE, ageYears: 30, weightKg: 70,
                    heightCm: 165, activityLevel: MODERATE
                  }
                  goal: { weightGoal: LOSE, goalPace: MODERATE, targetWeightKg: 60 }
                }
              ) {
                dailyCalories
                proteinGrams
                carbsGrams
                fatGrams
                weeksToGoal
                warnings
              }
            }
        """
        context = info.context
        orchestrator = context.get("target_orchestrator")

        if not orchestrator:
            raise Exception("Missing target_orchestrator in GraphQL context")

        handler = CalculateTargetQueryHandler(orchestrator)
        target = handler.handle(map_input_to_domain(input))
        return map_domain_target_to_graphql(target)
