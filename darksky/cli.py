"""CLI entry point for the Dark Sky forecast client."""

import argparse
import logging
from datetime import UTC, datetime

from darksky.api.codec import forecast_to_json
from darksky.config.loader import load_config, masked_config_json, request_from_config
from darksky.models.response import ForecastResponse


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="darksky",
        description="Dark Sky weather forecast client",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # forecast
    fc_p = sub.add_parser("forecast", help="Fetch the forecast for a location")
    fc_p.add_argument("latitude", type=float)
    fc_p.add_argument("longitude", type=float)
    fc_p.add_argument("--time", type=int, default=None, help="Unix time (Time Machine)")
    fc_p.add_argument("--lang", default=None, help="Summary language code")
    fc_p.add_argument("--units", default=None, help="Units code (us, si, ca, uk2, auto)")
    fc_p.add_argument("--base-url", default=None, help="Override the API base URL")
    fc_p.add_argument("--json", action="store_true", help="Print the forecast as JSON")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_forecast(config, args) -> int:
    if not config.api_key:
        print("Error: no API key (set api_key in the config or DARKSKY_API_KEY)")
        return 1

    request = request_from_config(config, args.latitude, args.longitude)
    if args.base_url:
        request.with_base_url(args.base_url)
    if args.time is not None:
        request.with_time(args.time)
    if args.lang:
        request.with_lang(args.lang)
    if args.units:
        request.with_units(args.units)

    response = request.get()
    if response.error is not None:
        print(f"Error: {response.error}")
        return 1

    if args.json:
        print(forecast_to_json(response.forecast, indent=2))
    else:
        _print_summary(response)
    return 0


def _print_summary(response: ForecastResponse) -> None:
    forecast = response.forecast
    now = forecast.currently
    observed = datetime.fromtimestamp(now.time, UTC).isoformat()

    print(f"Location: {forecast.latitude}, {forecast.longitude} ({forecast.timezone})")
    print(f"Observed: {observed}")
    print(f"Currently: {now.summary} | {now.temperature} (feels like {now.apparent_temperature})")
    print(f"Wind: {now.wind_speed} {now.wind_direction}".rstrip())
    if forecast.daily.summary:
        print(f"This week: {forecast.daily.summary}")
    print(f"Alerts: {len(forecast.alerts)}")
    for alert in forecast.alerts:
        print(f"  {alert.title}")
    print(f"API calls today: {response.api_call_count}")


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(masked_config_json(config))
        return 0
    else:
        print("Use: config show")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
