"""CLI entry point for the demo forecast service."""

import argparse
import logging
import random
from datetime import date

from pydantic import ValidationError

from demoapi.config.loader import get_config_value, load_config, set_config_value
from demoapi.config.schema import ServiceConfig
from demoapi.forecast.conversion import to_fahrenheit
from demoapi.forecast.generator import ForecastGenerator
from demoapi.formatters import format_forecast_json, format_forecast_text

DEFAULT_CONFIG = "configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="demoapi",
        description="Synthetic weather forecast service",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP API")
    serve_p.add_argument("--host", help="Bind address")
    serve_p.add_argument("--port", type=int, help="Bind port")

    # forecast
    fc_p = sub.add_parser("forecast", help="Print a generated forecast")
    fc_p.add_argument("--days", type=int, help="Number of days")
    fc_p.add_argument("--seed", type=int, help="Seed for reproducible output")
    fc_p.add_argument("--json", action="store_true", help="Print JSON")

    # convert
    conv_p = sub.add_parser("convert", help="Convert Celsius to Fahrenheit")
    conv_p.add_argument("celsius", type=int)

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except ValidationError as e:
        print(f"Error: invalid config {args.config}: {e}")
        return 1

    logging.basicConfig(
        level=config.logging.level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(config.logging.level.value)

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "convert":
        return _cmd_convert(args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config: ServiceConfig, args) -> int:
    import uvicorn

    from demoapi.api import create_app

    uvicorn.run(
        create_app(config),
        host=args.host if args.host is not None else config.server.host,
        port=args.port if args.port is not None else config.server.port,
    )
    return 0


def _cmd_forecast(config: ServiceConfig, args) -> int:
    if args.days is not None:
        try:
            config = set_config_value(config, "forecast.days", args.days)
        except ValueError as e:
            print(f"Error: invalid --days {args.days}: {e}")
            return 1
    days = config.forecast.days
    rng = random.Random(args.seed) if args.seed is not None else None
    generator = ForecastGenerator(
        summaries=config.forecast.summaries,
        rng=rng,
        min_temp_c=config.forecast.min_temp_c,
        max_temp_c=config.forecast.max_temp_c,
    )
    try:
        entries = generator.generate(days, date.today())
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if args.json:
        print(format_forecast_json(entries))
    else:
        print(format_forecast_text(entries))
    return 0


def _cmd_convert(args) -> int:
    try:
        fahrenheit = to_fahrenheit(args.celsius)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    print(f"{args.celsius}°C = {fahrenheit}°F")
    return 0


def _cmd_config(config: ServiceConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except (KeyError, ValueError) as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1
