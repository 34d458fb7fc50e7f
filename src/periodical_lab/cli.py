"""Command-line interface for periodical-lab."""

import argparse
import logging
import sys
from datetime import datetime

from pydantic import ValidationError

from schemas import Edition, Magazine

from .report import ReportRenderer
from .sample import build_sample_magazine

EDITION_TITLE = "Science"
EDITION_CIRCULATION = 1000
NEGATIVE_CIRCULATION = -500
RENAMED_TITLE = "Future of Technology"
MIN_RATING = 4.0
TITLE_KEYWORD = "intellect"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def describe_validation_error(error: ValidationError) -> str:
    """Extract the validator messages from a pydantic ValidationError.

    Args:
        error: The raised validation error

    Returns:
        The messages of the original ValueErrors, joined with "; "
    """
    messages = []
    for detail in error.errors():
        cause = detail.get("ctx", {}).get("error")
        messages.append(str(cause) if cause is not None else detail["msg"])
    return "; ".join(messages)


def compare_editions(released: datetime) -> dict:
    """Build two editions with identical fields and compare them.

    Returns:
        Dict with 'editions_equal', 'edition_hashes' and, when the
        circulation assignment was rejected, 'validation_error'
    """
    logger = logging.getLogger(__name__)

    first = Edition(title=EDITION_TITLE, release_date=released, circulation=EDITION_CIRCULATION)
    second = Edition(title=EDITION_TITLE, release_date=released, circulation=EDITION_CIRCULATION)
    result = {
        "editions_equal": first == second,
        "edition_hashes": (hash(first), hash(second)),
        "validation_error": None,
    }

    try:
        first.circulation = NEGATIVE_CIRCULATION
    except ValidationError as e:
        result["validation_error"] = describe_validation_error(e)
        logger.debug(f"Rejected circulation {NEGATIVE_CIRCULATION}: {result['validation_error']}")

    return result


def explore_magazine(magazine: Magazine) -> dict:
    """Copy, rename and query a magazine.

    The magazine text is captured before the rename so the report shows
    the original, the renamed original and the untouched copy.

    Args:
        magazine: Magazine to explore; its title is changed

    Returns:
        Dict of rendered texts and query results for the report
    """
    magazine_text = str(magazine)

    copy = magazine.deep_copy()
    magazine.title = RENAMED_TITLE

    return {
        "magazine": magazine,
        "magazine_text": magazine_text,
        "original_text": str(magazine),
        "copy_text": str(copy),
        "summary": magazine.to_short_string(),
        "min_rating": MIN_RATING,
        "by_rating": list(magazine.get_articles_by_rating(MIN_RATING)),
        "keyword": TITLE_KEYWORD,
        "by_title": list(magazine.get_articles_by_title(TITLE_KEYWORD)),
        "idle_editors": list(magazine.get_editors_without_articles()),
        "outside_articles": list(magazine),
    }


def run_demo(args: argparse.Namespace) -> int:
    """Execute the demonstration run.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        now = datetime.now()
        magazine = build_sample_magazine(release_date=now)

        if args.json:
            print(magazine.model_dump_json(indent=2))
            return 0

        context = {"run_date": now}
        context.update(compare_editions(now))
        context.update(explore_magazine(magazine))

        print(ReportRenderer().render(**context))
        logger.info(f"Demonstrated {magazine.title} with {len(magazine.articles)} articles")

        return 0

    except Exception as e:
        logger.error(f"Demonstration failed: {e}")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="periodical-lab",
        description="Demonstrate persons, editions, articles and magazines with sample data",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the sample magazine as JSON instead of the report",
    )

    args = parser.parse_args(argv)

    return run_demo(args)


if __name__ == "__main__":
    sys.exit(main())
