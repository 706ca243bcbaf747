from .csv_export import CSV_HEADERS, waypoints_to_dataframe, write_csv
from .xml_export import waypoint_only_filename, export_waypoints_only

__all__ = [
    'CSV_HEADERS',
    'waypoints_to_dataframe',
    'write_csv',
    'waypoint_only_filename',
    'export_waypoints_only',
]
