from .tree import as_list, resolve_text, get_path, parse_xml, unparse_xml
from .extractor import WaypointExtractor, extract_waypoints, parse_position
from .reconstructor import DocumentReconstructor, build_waypoint_only_document

__all__ = [
    'as_list',
    'resolve_text',
    'get_path',
    'parse_xml',
    'unparse_xml',
    'WaypointExtractor',
    'extract_waypoints',
    'parse_position',
    'DocumentReconstructor',
    'build_waypoint_only_document',
]
