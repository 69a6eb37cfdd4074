"""CSV export of retroactive analysis results."""

from goaltrack.export.csv_exporter import (
    export_goal_summary,
    export_retroactive_analysis,
    generate_filename,
)

__all__ = [
    "export_goal_summary",
    "export_retroactive_analysis",
    "generate_filename",
]
