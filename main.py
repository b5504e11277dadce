import argparse
import logging
import sys
from pathlib import Path

from stock_feed import settings
from stock_feed.logger import setup_logger
from stock_feed.pipelines.inventory_feed import StockFeedPipeline

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export Shopify stock levels to the partner feed and upload it over FTP."
    )
    parser.add_argument(
        "--test",
        action="store_true",
        help="Build and save the feed but skip the FTP upload.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help=f"Where the CSV is written (default: {settings.OUTPUT_DIR}).",
    )
    return parser.parse_args(argv)


def run_process(argv=None) -> int:
    """
    Main orchestration function. Every failure is logged here and mapped to
    the same exit status.
    """
    args = parse_args(argv)
    setup_logger()

    logger.info("Starting process...")
    try:
        pipeline = StockFeedPipeline(
            settings.build_feed_config(),
            output_dir=args.output_dir,
            test_mode=args.test,
        )
        pipeline.run()
    except Exception as e:
        logger.exception(f"❌ Process failed: {e}")
        return 1

    logger.info("Process completed successfully!")
    return 0


def main():
    sys.exit(run_process())


if __name__ == "__main__":
    main()
