"""
Main CLI entry point for the Custom Query Blocks admin settings page.

Renders the tabbed settings page as text, prints the plugin-list links, or
opens the Textual interface.
"""

import argparse
import sys
from pathlib import Path

import yaml

from ptam.logging import configure_logging_from_args, format_exception_summary, get_logger

DEFAULT_CONFIG_PATH = Path.cwd() / "ptam.yaml"


def build_parser() -> argparse.ArgumentParser:
    """
    Build the main argument parser with subcommands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="ptam",
        description="Custom Query Blocks - admin settings page",
        epilog="Use 'ptam <command> --help' for more information on a specific command.",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH} when present)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output (DEBUG level)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (overrides --verbose)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to file",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
        required=False,  # Allow running without command for interactive mode
    )

    # -------------------------------------------------------------------------
    # Page selection (shared by render and tui)
    # -------------------------------------------------------------------------
    selection = argparse.ArgumentParser(add_help=False)
    selection.add_argument("--tab", help="Requested tab id")
    selection.add_argument("--sub-tab", dest="sub_tab", help="Requested sub-tab id")
    selection.add_argument(
        "--query",
        help="Raw query string, e.g. 'page=custom-query-blocks&tab=support' (overrides --tab/--sub-tab)",
    )

    subparsers.add_parser(
        "render",
        parents=[selection],
        help="Render the settings page as text",
        description="Resolve the active tab and sub-tab and print the page.",
    )
    subparsers.add_parser(
        "links",
        help="Print the menu entry and plugin-list links",
    )
    subparsers.add_parser(
        "tui",
        parents=[selection],
        help="Open the settings page in the terminal UI",
    )

    return parser


def _request_from_args(args: argparse.Namespace):
    from ptam.admin.request import AdminRequest

    if getattr(args, "query", None):
        return AdminRequest.from_query(args.query)
    return AdminRequest.from_query(
        {"tab": getattr(args, "tab", None), "subtab": getattr(args, "sub_tab", None)}
    )


def run_render(settings, args: argparse.Namespace) -> int:
    from ptam.ui.tui.presenters.settings import format_page_text

    view = settings.render(_request_from_args(args))
    print(format_page_text(view, view.body))
    return 0


def run_links(settings) -> int:
    menu = settings.menu_page()
    print(f"Menu: {menu.parent} > {menu.menu_title} ({menu.menu_slug}, requires {menu.capability})")
    for link in settings.plugin_action_links([]):
        print(f"Action link: {link.label} -> {link.url}")
    for link in settings.plugin_row_meta([], settings.config.plugin_file):
        print(f"Row meta: {link.label} -> {link.url}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the ptam CLI.

    Args:
        argv: Command-line arguments (for testing)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging_from_args(
        verbose=args.verbose,
        log_level=args.log_level,
        log_file=str(args.log_file) if args.log_file else None,
    )

    logger = get_logger(__name__)
    logger.debug("Parsed arguments: %s", args)

    from ptam.config import AdminConfig, load_config_from_file

    cfg_path = args.config
    if cfg_path is None and DEFAULT_CONFIG_PATH.exists():
        cfg_path = DEFAULT_CONFIG_PATH

    try:
        if cfg_path is None:
            logger.info("No configuration file; using defaults")
            config = AdminConfig()
        else:
            cfg_path = Path(cfg_path).expanduser().resolve()
            if not cfg_path.exists():
                logger.error("Config file not found: %s", cfg_path)
                print(f"Error: Configuration file not found: {cfg_path}")
                return 1
            logger.info("Loading configuration from: %s", cfg_path)
            config = load_config_from_file(cfg_path)
    except (ValueError, yaml.YAMLError) as exc:
        logger.error("Invalid configuration: %s", exc)
        print(f"Error: Invalid configuration: {format_exception_summary(exc)}")
        return 1

    from ptam.admin.bootstrap import create_admin_settings

    settings = create_admin_settings(config)

    try:
        if args.command == "render":
            return run_render(settings, args)
        if args.command == "links":
            return run_links(settings)

        logger.info("Starting TUI interface")
        from ptam.ui.tui.app import run_tui
        return run_tui(settings, _request_from_args(args))

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print("\nInterrupted by user.")
        return 130

    except Exception as e:
        logger.exception("Unhandled exception in main")
        print(f"\nError: {e}", file=sys.stderr)
        if args.verbose:
            raise
        return 1


if __name__ == "__main__":
    sys.exit(main())
