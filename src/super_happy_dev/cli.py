"""
CLI entrypoint:
  super-happy-dev [--output-dir DIR] [--no-publish]
  python -m super_happy_dev ...
"""

import argparse
import sys
import traceback
from typing import List, Optional

from super_happy_dev import config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate and publish a Super Happy Dev news micro-podcast episode"
    )
    parser.add_argument(
        "--output-dir",
        default=config.OUTPUT_DIR,
        help=f"Directory for the episode WAV file (default: {config.OUTPUT_DIR})",
    )
    parser.add_argument(
        "--no-publish",
        action="store_true",
        help="Stop after audio synthesis (skip Cloudinary upload and Mastodon post)",
    )
    return parser


def main(argv: Optional[List[str]] = None, **adapter_overrides) -> int:
    """Run one episode. Returns the process exit status (0 ok, 1 on any failure)."""
    args = build_parser().parse_args(argv)

    from super_happy_dev.adapters import default_adapters
    from super_happy_dev.application.pipeline import EpisodePipeline

    try:
        pipeline = EpisodePipeline(
            **default_adapters(**adapter_overrides),
            output_dir=args.output_dir,
            publish=not args.no_publish,
        )
        pipeline.run()
    except Exception as e:
        print(f"\n❌ Episode failed: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
