#!/usr/bin/env python3
"""
Flight Planning Calculations - Main Entry Point
Great-circle distance, wind triangle and fuel planning from the command line
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from backend import (
    FlightPlanningError,
    FuelOptions,
    GeoPoint,
    bearing_to_compass,
    calculate_bearing,
    calculate_fuel_consumption,
    calculate_great_circle_distance,
    calculate_mass_and_balance,
    calculate_wind_triangle,
    format_ete,
    get_aircraft,
    get_airport,
    plan_leg,
)
from backend.config.constants import DEFAULT_RESERVE_MINUTES
from common import logger as debug_logger

# Exit status for invalid coordinates or parameters
EXIT_INVALID_INPUT = 2

console = Console()


def parse_point(value: str) -> GeoPoint:
    """Parse an ICAO airport code or a "lat,lon" pair into a GeoPoint."""
    if ',' in value:
        lat_str, lon_str = value.split(',', 1)
        try:
            return GeoPoint(lat=float(lat_str), lon=float(lon_str))
        except ValueError:
            raise argparse.ArgumentTypeError(f"Invalid coordinate pair: {value}")

    point = get_airport(value)
    if point is None:
        raise argparse.ArgumentTypeError(f"Unknown airport: {value} (use ICAO code or lat,lon)")
    return point


def parse_wind(value: str) -> tuple:
    """Parse a wind given as DDD/SS (direction from, speed in knots)."""
    try:
        direction, speed = value.split('/', 1)
        return float(direction), float(speed)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid wind: {value} (expected DDD/SS, e.g. 270/15)")


def _fuel_options(args: argparse.Namespace) -> FuelOptions:
    return FuelOptions(
        reserve_minutes=args.reserve,
        alternate_distance=args.alt_distance,
        alternate_ground_speed=args.alt_gs,
    )


def _add_fuel_option_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--reserve",
        type=float,
        default=None,
        help=f"Reserve in minutes of fuel flow (e.g. {DEFAULT_RESERVE_MINUTES})",
    )
    parser.add_argument(
        "--alt-distance",
        type=float,
        default=None,
        help="Distance to the alternate airport in NM",
    )
    parser.add_argument(
        "--alt-gs",
        type=float,
        default=None,
        help="Ground speed on the alternate leg in knots",
    )


def _result_table(title: str) -> Table:
    table = Table(title=title, show_header=False, title_style="bold cyan")
    table.add_column("Item", style="bold")
    table.add_column("Value", justify="right")
    return table


def cmd_distance(args: argparse.Namespace) -> None:
    distance = calculate_great_circle_distance(args.origin, args.destination)
    bearing = calculate_bearing(args.origin, args.destination)

    table = _result_table("Great Circle")
    table.add_row("Distance", f"{distance:.1f} NM")
    table.add_row("Initial bearing", f"{bearing:05.1f}° ({bearing_to_compass(bearing)})")
    console.print(table)


def cmd_wind(args: argparse.Namespace) -> None:
    result = calculate_wind_triangle(args.tas, args.wind_speed, args.wind_direction, args.course)
    side = "right" if result.wind_correction_angle >= 0 else "left"

    table = _result_table("Wind Triangle")
    table.add_row("Ground speed", f"{result.ground_speed:.1f} kt")
    table.add_row("Wind correction", f"{abs(result.wind_correction_angle):.1f}° {side}")
    console.print(table)


def cmd_fuel(args: argparse.Namespace) -> None:
    plan = calculate_fuel_consumption(args.distance, args.ground_speed, args.fuel_flow, _fuel_options(args))

    table = _result_table("Fuel Plan")
    table.add_row("Flight time", format_ete(plan.flight_time))
    table.add_row("Trip fuel", f"{plan.fuel_used:.1f} gal")
    table.add_row("Reserve fuel", f"{plan.reserve_fuel:.1f} gal")
    table.add_row("Alternate fuel", f"{plan.alternate_fuel:.1f} gal")
    table.add_row("Total fuel", f"[bold]{plan.total_fuel:.1f} gal[/bold]")
    console.print(table)


def cmd_leg(args: argparse.Namespace) -> None:
    aircraft = get_aircraft(args.aircraft)
    if aircraft is None:
        raise argparse.ArgumentTypeError(f"Unknown aircraft type: {args.aircraft}")

    wind_direction, wind_speed = args.wind
    leg = plan_leg(args.origin, args.destination, aircraft, wind_direction, wind_speed, _fuel_options(args))

    table = _result_table(f"Leg Plan - {aircraft.name}")
    table.add_row("Distance", f"{leg.distance:.1f} NM")
    table.add_row("True course", f"{leg.true_course:03.0f}°")
    table.add_row("Heading", f"{leg.heading:03.0f}°")
    table.add_row("Ground speed", f"{leg.wind.ground_speed:.0f} kt")
    table.add_row("Flight time", format_ete(leg.fuel.flight_time))
    table.add_row("Total fuel", f"{leg.fuel.total_fuel:.1f} gal")
    if leg.fuel_sufficient:
        table.add_row("Fuel", "[green]sufficient[/green]")
    else:
        table.add_row("Fuel", f"[red]exceeds capacity of {aircraft.fuel_capacity:.0f} gal![/red]")
    console.print(table)


def cmd_mass_balance(args: argparse.Namespace) -> None:
    aircraft = get_aircraft(args.aircraft)
    if aircraft is None:
        raise argparse.ArgumentTypeError(f"Unknown aircraft type: {args.aircraft}")

    result = calculate_mass_and_balance(aircraft, args.pilot, args.passengers, args.baggage, args.fuel)

    table = _result_table(f"Mass & Balance - {aircraft.name}")
    table.add_row("Total weight", f"{result.total_weight:.2f} lbs")
    table.add_row("Total moment", f"{result.total_moment:.2f} lb-in")
    table.add_row("Centre of gravity", f"{result.center_of_gravity:.2f} in")
    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Single-leg flight planning calculations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py distance KJFK KLAX
  python main.py distance 40,-74 41,-74
  python main.py wind 120 20 90 0
  python main.py fuel 300 120 10 --reserve 45 --alt-distance 50 --alt-gs 110
  python main.py leg KORD KDEN --aircraft SR22 --wind 270/25 --reserve 45
  python main.py mb C172 --pilot 180 --fuel 40

Coordinates starting with a minus sign must follow "--":
  python main.py distance -- -33.9,151.2 -37.7,144.8
        """
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Mirror debug log output to the console",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    distance = subparsers.add_parser("distance", help="Great-circle distance and initial bearing")
    distance.add_argument("origin", type=parse_point, help="ICAO code or lat,lon")
    distance.add_argument("destination", type=parse_point, help="ICAO code or lat,lon")
    distance.set_defaults(func=cmd_distance)

    wind = subparsers.add_parser("wind", help="Solve the wind triangle")
    wind.add_argument("tas", type=float, help="True airspeed in knots")
    wind.add_argument("wind_speed", type=float, help="Wind speed in knots")
    wind.add_argument("wind_direction", type=float, help="Wind direction (from) in degrees true")
    wind.add_argument("course", type=float, help="Desired course in degrees true")
    wind.set_defaults(func=cmd_wind)

    fuel = subparsers.add_parser("fuel", help="Flight time and fuel for a leg")
    fuel.add_argument("distance", type=float, help="Distance in NM")
    fuel.add_argument("ground_speed", type=float, help="Ground speed in knots")
    fuel.add_argument("fuel_flow", type=float, help="Fuel flow in gal/hr")
    _add_fuel_option_arguments(fuel)
    fuel.set_defaults(func=cmd_fuel)

    leg = subparsers.add_parser("leg", help="Plan a leg between two points")
    leg.add_argument("origin", type=parse_point, help="ICAO code or lat,lon")
    leg.add_argument("destination", type=parse_point, help="ICAO code or lat,lon")
    leg.add_argument("--aircraft", "-a", default="C172", help="Aircraft type code (default: C172)")
    leg.add_argument("--wind", "-w", type=parse_wind, default=(0.0, 0.0), help="Wind as DDD/SS (default: calm)")
    _add_fuel_option_arguments(leg)
    leg.set_defaults(func=cmd_leg)

    mb = subparsers.add_parser("mb", help="Mass and balance")
    mb.add_argument("aircraft", help="Aircraft type code")
    mb.add_argument("--pilot", type=float, default=180.0, help="Pilot weight in lbs (default: 180)")
    mb.add_argument("--passengers", type=float, default=0.0, help="Passenger weight in lbs")
    mb.add_argument("--baggage", type=float, default=0.0, help="Baggage weight in lbs")
    mb.add_argument("--fuel", type=float, default=40.0, help="Fuel on board in gallons (default: 40)")
    mb.set_defaults(func=cmd_mass_balance)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        debug_logger.add_console_handler(logging.DEBUG)
        debug_logger.info(f"Log file: {debug_logger.get_log_file_path() or 'disabled'}")

    try:
        args.func(args)
    except FlightPlanningError as e:
        debug_logger.error(f"{args.command}: {e}")
        console.print(f"[bold red]Error:[/bold red] {e}")
        return EXIT_INVALID_INPUT
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    return 0


if __name__ == "__main__":
    sys.exit(main())
