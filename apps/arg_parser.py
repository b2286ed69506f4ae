import argparse
import sys

from tclogger import logger, dict_to_str


class ArgParser(argparse.ArgumentParser):
    def __init__(self, *args, argv: list[str] = None, **kwargs):
        super().__init__(*args, **kwargs)

        self.add_argument(
            "-i",
            "--input",
            type=str,
            default="-",
            help=f"JSON file with a list of results, '-' for stdin",
        )
        self.add_argument(
            "-o",
            "--output",
            type=str,
            help=f"Write sorted JSON to this file instead of stdout",
        )
        self.add_argument(
            "--focus-lat",
            type=float,
            help=f"Latitude of focus point",
        )
        self.add_argument(
            "--focus-lon",
            type=float,
            help=f"Longitude of focus point",
        )
        self.add_argument(
            "-l",
            "--loose-ties",
            action="store_true",
            help="Return 0 for score ties (only for stable sorts)",
        )
        self.add_argument(
            "-e",
            "--explain",
            action="store_true",
            help="Log the band of each sorted result",
        )

        if argv is None:
            argv = sys.argv[1:]
        self.args, self.unknown_args = self.parse_known_args(argv)

    def get_clean(self) -> dict:
        clean = {}
        if self.args.focus_lat is not None:
            clean["focus.point.lat"] = self.args.focus_lat
        if self.args.focus_lon is not None:
            clean["focus.point.lon"] = self.args.focus_lon

        logger.note(f"Request:")
        logger.mesg(dict_to_str(clean) if clean else "  (no focus point)")

        return clean
