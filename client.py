import argparse, logging, os, sys
from logging.handlers import RotatingFileHandler

from config import LOG_DIR, LOG_LEVEL, VA_REQUEST_TIMEOUT, VA_SERVER_URL
from dispatcher import dispatch_all, logger
from errors import ArgumentCountError, ArgumentGrammarError
from grammar import parse_args

USAGE = """\
Usage: va-creator <token> FROM <start> TO <end> <type>
   or: va-creator <token> FOR [id1,id2,id3,...] <type>

Commands:
  FROM <start> TO <end>   Creates analytics for all stream IDs from <start> to <end>, inclusive.
  FOR [list]              Creates analytics for each stream ID in the comma-separated list. Spaces are allowed.

<type> must be 'od' for Object Detection or 'sva' for Smart VA.

Examples:
  va-creator abc123 FROM 10 TO 15 od
  va-creator abc123 FOR [2, 5, 8] sva
"""


def setup_logging(verbose=False):
    # повторный вызов (тесты, несколько main() в одном процессе) не дублирует хендлеры
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    log_path = os.path.join(LOG_DIR, "va_creator.log")
    handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(message)s")
    handler.setFormatter(fmt)
    logger.setLevel(logging.DEBUG if verbose else LOG_LEVEL)
    logger.addHandler(handler)
    if verbose:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        logger.addHandler(console)


def print_usage():
    print(USAGE)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="va-creator",
        description="Create OD / Smart VA analytics for a range or list of stream IDs",
        usage="%(prog)s [--url URL] [--timeout SECONDS] [-v] <token> (FROM <start> [TO] <end> | FOR [ids]) <type>",
        epilog=USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--url", default=VA_SERVER_URL, help="Video analytics server base URL")
    parser.add_argument("--timeout", type=int, default=VA_REQUEST_TIMEOUT, help="Per-request timeout, seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log to stderr as well")
    # REMAINDER: отрицательные числа и "[1," и т.п. не трактуются как опции
    parser.add_argument("command", nargs=argparse.REMAINDER)
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        parsed = parse_args(args.command)
    except ArgumentCountError:
        print_usage()
        return 0
    except ArgumentGrammarError as e:
        logger.warning(f"Bad arguments: {e}")
        print(e, file=sys.stderr)
        print_usage()
        return 0

    logger.info(
        f"Creating {parsed.analytics_type.name} analytics for {len(parsed.stream_ids)} stream(s) at {args.url}"
    )
    dispatch_all(parsed.token, parsed.stream_ids, parsed.analytics_type, base_url=args.url, timeout=args.timeout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
