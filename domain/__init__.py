"""Domain layer for nutrition target calculation.

Pure business logic (BMR, TDEE, goal adjustment, macro split), decoupled
from the GraphQL presentation and from infrastructure.
"""
