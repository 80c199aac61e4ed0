"""
Quran Translation Alignment CLI

A small command-line front end for inspecting verse ranges and translation
names with the same chapter metadata and catalog the application uses. It
never loads verse text.

--- CLI Usage Examples ---

# 1. List the verse keys of a range that crosses a chapter boundary
python -m quran.translation.main keys 1:6-2:3

# 2. Count the verses in a range
python -m quran.translation.main count 2:1-286

# 3. Resolve display names for translation databases
python -m quran.translation.main names sahih.db hilali.db --catalog data/catalog.yaml
"""
import argparse
import sys

from quran.translation.aligner import TranslationAligner
from quran.translation.catalog import load_catalog
from quran.translation.chapters import load_chapter_info
from quran.translation.config import load_config
from quran.translation.logger import get_logger, setup_logging
from quran.translation.verse import InvalidRangeError, parse_verse_range

logger = get_logger(__name__)


def cmd_keys(args, aligner):
    verse_range = parse_verse_range(args.range, aligner.chapters)
    for key in aligner.keys_in_range(verse_range):
        print(key)
    return 0


def cmd_count(args, aligner):
    verse_range = parse_verse_range(args.range, aligner.chapters)
    print(verse_range.verse_count)
    return 0


def cmd_names(args, aligner):
    catalog = load_catalog(args.catalog) if args.catalog else {}
    for name in aligner.translation_names(args.identifiers, catalog):
        print(name)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        description="Inspect verse ranges and translation names.",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument('--config-dir', default='./config', help="Directory holding app.yaml and data.yaml.")
    parser.add_argument('--env-file', default='.env', help="Optional file of dotted-key overrides.")
    parser.add_argument('--log-level', default=None, help="Overrides app.logging.level (e.g. DEBUG).")
    subparsers = parser.add_subparsers(dest='command', required=True)

    keys_parser = subparsers.add_parser('keys', help="Print every verse key in a range.")
    keys_parser.add_argument('range', help="Range such as '2:255', '1:1-7' or '1:6-2:3'.")
    keys_parser.set_defaults(func=cmd_keys)

    count_parser = subparsers.add_parser('count', help="Print the number of verses in a range.")
    count_parser.add_argument('range', help="Range such as '2:255', '1:1-7' or '1:6-2:3'.")
    count_parser.set_defaults(func=cmd_count)

    names_parser = subparsers.add_parser('names', help="Resolve translation display names.")
    names_parser.add_argument('identifiers', nargs='+', help="Translation identifiers, e.g. 'sahih.db'.")
    names_parser.add_argument('--catalog', default=None, help="YAML catalog file. Defaults to data.paths.catalog_file.")
    names_parser.set_defaults(func=cmd_names)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = load_config(args.config_dir, args.env_file)
    logging_cfg = cfg.app.get('logging')
    setup_logging(
        log_dir_path=logging_cfg.get('dir') if logging_cfg else None,
        run_log_name=(logging_cfg.get('file_name') if logging_cfg else None) or 'alignment',
        log_level_str=args.log_level or (logging_cfg.get('level') if logging_cfg else None) or 'INFO',
    )

    if args.command == 'names' and args.catalog is None:
        paths = cfg.data.get('paths')
        args.catalog = paths.get('catalog_file') if paths else None

    try:
        aligner = TranslationAligner(load_chapter_info(cfg))
        return args.func(args, aligner)
    except InvalidRangeError as e:
        logger.error(f"Invalid verse range: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
