#!/usr/bin/env python3

"""
Command line interface for AIXM waypoint extraction.

Examples:
    aixm-waypoints list Donlon.xml --sort
    aixm-waypoints csv Donlon.xml -o waypoints.csv
    aixm-waypoints export Donlon.xml
    aixm-waypoints distance Donlon.xml ABLAN BOKSU --unit nm
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import AXIS_ORDER, CACHE_DIR, DEFAULT_DISTANCE_UNIT, LOG_FORMAT, LOG_LEVEL, AxisOrder
from .document import AixmDocument
from .exceptions import AixmError
from .export.csv_export import write_csv
from .export.xml_export import export_waypoints_only
from .models.waypoint_collection import WaypointCollection
from .parsers.extractor import WaypointExtractor
from .sources.base import DocumentSource
from .sources.file import FileSource
from .sources.web import WebSource
from .utils.geodesic import DistanceUnit

logger = logging.getLogger(__name__)


class WaypointTool:
    """Runs one command of the command line tool."""

    def __init__(self, args: argparse.Namespace):
        self.args = args
        self.source = self._make_source()
        self.extractor = WaypointExtractor(axis_order=args.axis_order)

    def _make_source(self) -> DocumentSource:
        if self.args.url:
            source = WebSource(cache_dir=self.args.cache_dir, url=self.args.source,
                               max_age_days=self.args.max_age_days)
            if self.args.force_refresh:
                source.set_force_refresh()
            if self.args.never_refresh:
                source.set_never_refresh()
            return source
        return FileSource(self.args.source)

    def load_document(self) -> AixmDocument:
        document = self.source.load()
        logger.info(f"Loaded {self.source.get_source_name()}")
        return document

    def load_waypoints(self) -> Optional[WaypointCollection]:
        waypoints = self.load_document().waypoints(self.extractor)
        if waypoints.is_empty():
            logger.error("No waypoints found")
            return None
        if getattr(self.args, 'search', None):
            waypoints = waypoints.search(self.args.search)
        if getattr(self.args, 'sort', False):
            waypoints = waypoints.sorted_by_designator()
        return waypoints

    def run_list(self) -> int:
        waypoints = self.load_waypoints()
        if waypoints is None:
            return 1
        for wp in waypoints:
            lat_dms, lon_dms = wp.to_dms()
            print(f"{wp.designator:<12} {wp.lat:>12} {wp.lon:>12}  {lat_dms:<18} {lon_dms}")
        logger.info(f"{len(waypoints)} waypoints")
        return 0

    def run_csv(self) -> int:
        waypoints = self.load_waypoints()
        if waypoints is None:
            return 1
        text = write_csv(waypoints, self.args.output)
        if self.args.output is None:
            sys.stdout.write(text)
        return 0

    def run_export(self) -> int:
        path = export_waypoints_only(self.load_document(), self.args.output)
        if path is None:
            logger.error("No waypoints found")
            return 1
        print(path)
        return 0

    def run_distance(self) -> int:
        waypoints = self.load_waypoints()
        if waypoints is None:
            return 1
        origin = waypoints.by_designator(self.args.origin)
        destination = waypoints.by_designator(self.args.destination)
        if origin.id == destination.id:
            logger.error(f"Select two different waypoints, got {origin.designator} twice")
            return 1
        print(f"{origin.designator} -> {destination.designator}: "
              f"{origin.formatted_distance_to(destination, self.args.unit, with_label=True)}")
        return 0

    def run(self) -> int:
        return getattr(self, f"run_{self.args.command}")()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Extract waypoints from AIXM 5.1 documents')

    # Shared source options
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('source', help='AIXM XML file (or URL with --url)')
    common.add_argument('--url', help='Treat source as a URL to download', action='store_true')
    common.add_argument('-c', '--cache-dir', help='Directory to cache downloaded files', default=CACHE_DIR)
    common.add_argument('--force-refresh', help='Force download even if cached', action='store_true')
    common.add_argument('--never-refresh', help='Use cached files regardless of age', action='store_true')
    common.add_argument('--max-age-days', help='Refresh cached files older than this', type=int, default=None)
    common.add_argument('--axis-order', help='Order of the numbers in gml:pos',
                        type=AxisOrder.parse, choices=list(AxisOrder), default=AXIS_ORDER)
    common.add_argument('-v', '--verbose', help='Verbose output', action='store_true')

    subparsers = parser.add_subparsers(dest='command', required=True)

    list_parser = subparsers.add_parser('list', parents=[common], help='Print the waypoints')
    list_parser.add_argument('--sort', help='Sort by designator', action='store_true')
    list_parser.add_argument('--search', help='Only waypoints whose designator contains this text')

    csv_parser = subparsers.add_parser('csv', parents=[common], help='Export the waypoints as CSV')
    csv_parser.add_argument('-o', '--output', help='CSV output file (default: stdout)')
    csv_parser.add_argument('--sort', help='Sort by designator', action='store_true')

    export_parser = subparsers.add_parser('export', parents=[common], help='Write a waypoints-only AIXM document')
    export_parser.add_argument('-o', '--output', help='Output file (default: <name>_waypoints_only.xml)')

    distance_parser = subparsers.add_parser('distance', parents=[common], help='Distance between two waypoints')
    distance_parser.add_argument('origin', help='Designator of the first waypoint')
    distance_parser.add_argument('destination', help='Designator of the second waypoint')
    distance_parser.add_argument('--unit', help='Distance unit', type=DistanceUnit.parse,
                                 choices=list(DistanceUnit), default=DistanceUnit.parse(DEFAULT_DISTANCE_UNIT))

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format=LOG_FORMAT)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        return WaypointTool(args).run()
    except AixmError as e:
        logger.error(str(e))
        return 1


if __name__ == '__main__':
    sys.exit(main())
