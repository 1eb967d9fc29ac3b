import argparse
import contextlib
import io
import json
import unittest

from geobound import defaults
from geobound.bound import Bound
from geobound.cli import (
    build_bound,
    create_argument_parser,
    main,
    parse_bound,
    parse_point,
    run,
)
from geobound.types import Point


def default_parser() -> argparse.ArgumentParser:
    return create_argument_parser(
        min_lat=defaults.MIN_LAT,
        max_lat=defaults.MAX_LAT,
        min_lon=defaults.MIN_LON,
        max_lon=defaults.MAX_LON,
        pad=defaults.PAD,
        log_file=None,
    )


class TestArgumentTypes(unittest.TestCase):
    def test_parse_point(self):
        self.assertEqual(Point(-70.5, 42.25), parse_point("-70.5,42.25"))

    def test_parse_point_invalid(self):
        for value in ("1", "1,2,3", "a,b"):
            with self.assertRaises(argparse.ArgumentTypeError):
                parse_point(value)

    def test_parse_bound_normalizes(self):
        self.assertEqual(
            Bound(Point(0.0, 0.0), Point(2.0, 3.0)), parse_bound("2,0,0,3")
        )

    def test_parse_bound_invalid(self):
        for value in ("1,2,3", "1,2,3,x"):
            with self.assertRaises(argparse.ArgumentTypeError):
                parse_bound(value)


class TestCli(unittest.TestCase):
    def test_defaults(self):
        args = default_parser().parse_args([])
        self.assertEqual(defaults.MIN_LAT, args.min_lat)
        self.assertEqual(defaults.MAX_LON, args.max_lon)
        self.assertEqual([], args.extend)
        self.assertEqual([], args.union)
        self.assertEqual([], args.contains)

        summary = run(args)
        self.assertEqual([defaults.MIN_LON, defaults.MIN_LAT], summary["min"])
        self.assertEqual([defaults.MAX_LON, defaults.MAX_LAT], summary["max"])
        self.assertFalse(summary["is_empty"])

    def test_build_bound(self):
        bound = build_bound(
            min_lat=0.0,
            max_lat=1.0,
            min_lon=0.0,
            max_lon=1.0,
            extend=[Point(2.0, 0.5)],
            union=[Bound(Point(-1.0, -1.0), Point(0.0, 0.0))],
            pad=1.0,
        )
        self.assertEqual(Bound(Point(-2.0, -2.0), Point(3.0, 2.0)), bound)

    def test_run(self):
        args = default_parser().parse_args(
            [
                "--min-lat",
                "0",
                "--max-lat",
                "2",
                "--min-lon",
                "0",
                "--max-lon",
                "4",
                "--contains",
                "4,2",
                "--contains=-1,1",
            ]
        )
        summary = run(args)

        self.assertEqual([2.0, 1.0], summary["center"])
        self.assertEqual(
            [[0.0, 0.0], [4.0, 0.0], [4.0, 2.0], [0.0, 2.0], [0.0, 0.0]],
            summary["ring"],
        )
        self.assertEqual({"4.0,2.0": True, "-1.0,1.0": False}, summary["contains"])
        self.assertFalse(summary["is_zero"])

    def test_run_over_padded(self):
        args = default_parser().parse_args(
            ["--min-lat", "0", "--max-lat", "1", "--pad", "-1"]
        )
        with self.assertLogs("geobound.cli", level="WARNING"):
            summary = run(args)
        self.assertTrue(summary["is_empty"])

    def test_main_prints_json(self):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            main(
                [
                    "--min-lat",
                    "0",
                    "--max-lat",
                    "0",
                    "--min-lon",
                    "0",
                    "--max-lon",
                    "0",
                ]
            )

        summary = json.loads(stdout.getvalue())
        self.assertTrue(summary["is_zero"])
        self.assertEqual([0.0, 0.0], summary["center"])

    def test_main_rejects_bad_point(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as context:
                main(["--extend", "nope"])
        self.assertEqual(2, context.exception.code)


if __name__ == "__main__":
    unittest.main()
