import argparse
import logging
import logging.config
import sys

from .config import DECODE_ERROR_POLICIES, Config
from .parser import DecodeError
from .pipeline import EventPipeline
from .runner import GoTestRunner, RunnerError
from .sink import ConsoleSink


def prepare_logger(level):
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": True,
            "formatters": {
                "default": {"format": "%(asctime)s [%(levelname)8s] %(message)s"},
            },
            "handlers": {
                "default": {
                    "level": "DEBUG",
                    "formatter": "default",
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "": {"handlers": ["default"], "level": "WARNING", "propagate": False},
                "gort": {
                    "handlers": ["default"],
                    "level": level,
                    "propagate": False,
                },
            },
        }
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="gort", description="condensed, colorized go test output")
    parser.add_argument("--config", metavar="FILENAME", help="ini file with a [gort] section")
    parser.add_argument("--log-level", help="log level of gort messages (stderr)")
    parser.add_argument("--on-decode-error", choices=DECODE_ERROR_POLICIES, help="what to do with non-JSON lines")
    parser.add_argument("--go-bin", help="go executable")
    parser.add_argument(
        "-i", "--input", type=argparse.FileType("rb"), help="read an existing go test -json stream (- for stdin)"
    )
    parser.add_argument("packages", nargs="*", help="packages passed to go test (default ./...)")

    return parser.parse_args(argv)


def load_config(args) -> Config:
    cfg = Config()

    if args.config:
        cfg.load_ini(args.config)

    cfg.load_env()

    cfg.set("log_level", args.log_level)
    cfg.set("on_decode_error", args.on_decode_error)
    cfg.set("go_bin", args.go_bin)

    return cfg


def main(argv=None):
    args = parse_args(argv)

    try:
        cfg = load_config(args)
    except Exception as e:
        print(f"gort: {e}", file=sys.stderr)
        return 2

    prepare_logger(cfg.log_level)
    logger = logging.getLogger(__name__)

    pipeline = EventPipeline(cfg, [ConsoleSink()])

    if args.input:
        try:
            with args.input:
                for line in args.input:
                    pipeline.put(line)
        except DecodeError as e:
            logger.error("%s: %r", e, e.line)
            return 1
        finally:
            pipeline.finish()
        return 0

    try:
        return GoTestRunner(cfg).run(args.packages, pipeline)
    except RunnerError as e:
        logger.error("%s", e)
        return 2
    except DecodeError as e:
        logger.error("%s: %r", e, e.line)
        return 1


if __name__ == "__main__":
    sys.exit(main())
