"""CLI entry point."""
import argparse
from pathlib import Path

from .errors import DirectoryError, RasterizerNotFoundError
from .pipeline import BatchPipeline
from .utils.logger import get_logger

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svg2puml",
        description="Convert a tree of SVG files into PlantUML sprites",
    )
    parser.add_argument("input", nargs="?", help="Directory containing SVG files")
    parser.add_argument("output", nargs="?", help="Directory to write .puml files to")
    return parser


def main(argv=None):
    parser = build_parser()
    args, _ = parser.parse_known_args(argv)

    if args.input is None or args.output is None:
        parser.print_usage()
        return

    try:
        pipeline = BatchPipeline()
        tally = pipeline.run(args.input, args.output)
    except RasterizerNotFoundError as e:
        logger.error(f"ERROR: {e}")
        return
    except DirectoryError as e:
        logger.error(f"Error accessing directory: {e}")
        return

    logger.info("Conversion complete:")
    logger.info(f"- Successfully processed: {tally.succeeded} files")
    logger.info(f"- Failed: {tally.failed} files")
    logger.info(f"Output directory: {Path(args.output).resolve()}")


if __name__ == "__main__":
    main()
