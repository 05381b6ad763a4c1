import argparse
import logging
import sys
from pathlib import Path

from gtm_embed.adapters.settings_errors import SettingsErrors
from gtm_embed.adapters.sqlite_options import SQLiteOptionStore
from gtm_embed.components.gtm_settings import GtmSettingsService
from gtm_embed.config.loader import load_config
from gtm_embed.domain.entities import CONTAINER_ID_OPTION

logger = logging.getLogger("cli")

CONFIG_PATH = "gtm.yaml"


def get_service(config_path: Path, errors: SettingsErrors | None = None) -> GtmSettingsService:
    try:
        config = load_config(config_path)
    except ValueError as e:
        logger.error(f"Invalid config {config_path}: {e}")
        sys.exit(1)

    Path(config.db_path).parent.mkdir(parents=True, exist_ok=True)
    return GtmSettingsService(SQLiteOptionStore(config.db_path), errors)


def handle_show(service: GtmSettingsService, args: argparse.Namespace) -> None:
    container_id = service.get()
    print(container_id if container_id else "(not set)")


def handle_set(
    service: GtmSettingsService, errors: SettingsErrors, args: argparse.Namespace
) -> None:
    result = service.update(args.value)
    if not result.success:
        for error in errors.get_errors(CONTAINER_ID_OPTION):
            logger.error(error.message)
        print(f"Container ID unchanged: {result.container_id or '(not set)'}")
        sys.exit(1)

    print(f"Container ID set to: {result.container_id or '(not set)'}")


def handle_uninstall(service: GtmSettingsService, args: argparse.Namespace) -> None:
    service.delete()
    print("Container ID option removed.")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Google Tag Manager embed CLI")
    parser.add_argument("--config", default=CONFIG_PATH, help="Path to the YAML config file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # show
    subparsers.add_parser("show", help="Print the stored container ID")

    # set
    set_parser = subparsers.add_parser("set", help="Validate and store a container ID")
    set_parser.add_argument("value", help="Container ID in the format GTM-XXXXXXX, or '' to clear")

    # uninstall
    subparsers.add_parser("uninstall", help="Remove the stored option")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    errors = SettingsErrors()
    service = get_service(Path(args.config), errors)

    if args.command == "show":
        handle_show(service, args)
    elif args.command == "set":
        handle_set(service, errors, args)
    elif args.command == "uninstall":
        handle_uninstall(service, args)


if __name__ == "__main__":
    main()
