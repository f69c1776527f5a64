"""Nutrition target domain: daily calorie and macronutrient targets."""
