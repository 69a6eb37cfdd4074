"""GoalTrack test suite."""
