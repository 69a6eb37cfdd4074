"""GoalTrack - savings goal tracking with retroactive performance analysis."""

__version__ = "0.1.0"
