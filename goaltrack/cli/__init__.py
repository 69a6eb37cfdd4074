"""Command-line interface for GoalTrack."""
