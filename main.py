import argparse
import logging
import sys
from pathlib import Path

from src.domain.errors import ConfigError
from src.infrastructure.config.config_store import ConfigStore
from src.infrastructure.di.container import Container
from src.infrastructure.cli.config_report import format_config_report
from src.infrastructure.repositories.legacy_script import DEFAULT_VARIABLE, render_legacy_script

logger = logging.getLogger(__name__)


def _load(args):
    # Wire dependencies
    container = Container()
    container.register_store(ConfigStore.from_path(Path(args.config), section=args.section or None))
    return container.get_config()


def _cmd_validate(args) -> int:
    _load(args)
    print("OK")
    return 0


def _cmd_show(args) -> int:
    print(format_config_report(_load(args)))
    return 0


def _cmd_export_js(args) -> int:
    script = render_legacy_script(_load(args), variable=args.variable)
    if args.output:
        Path(args.output).write_text(script, encoding='utf-8')
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(script)
    return 0


COMMANDS = {
    "validate": _cmd_validate,
    "show": _cmd_show,
    "export-js": _cmd_export_js,
}


def main(argv=None):
    parser = argparse.ArgumentParser(description="Relay controller client configuration tool")
    parser.add_argument("command", choices=sorted(COMMANDS), help="Action to perform")
    parser.add_argument("--config", default="config.yaml", help="Path to YAML/JSON config or legacy config.js")
    parser.add_argument("--section", default="device", help="Top-level YAML key holding the device record (empty for the whole document)")
    parser.add_argument("--output", default=None, help="export-js: file to write instead of stdout")
    parser.add_argument("--variable", default=DEFAULT_VARIABLE, help="export-js: JavaScript variable name")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        return COMMANDS[args.command](args)
    except OSError as e:
        # Sources re-raise a missing config with their own message and no filename
        if e.filename is not None:
            print(f"Cannot access {e.filename}: {e.strerror}", file=sys.stderr)
        else:
            print(str(e), file=sys.stderr)
        return 2
    except ConfigError as e:
        print(f"ConfigError: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
