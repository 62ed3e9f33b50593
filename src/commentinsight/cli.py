"""Command-line interface for CommentInsight."""

import argparse
import json
import logging
import sys
from pathlib import Path

from .core.config import AnalysisConfig, settings
from .core.constants import FileConstants
from .core.errors import AnalysisError, ConfigurationError, MalformedCommentError
from .services.runner import AnalysisRunner
from .utils.data_prep import export_to_csv, export_to_json, load_comments, prepare_export

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def cmd_analyze(args):
    """Analyze command."""
    comments = load_comments(args.input_file)
    config = AnalysisConfig.from_settings(
        max_comments=args.max_comments,
        top_keywords_count=args.top_keywords,
        min_keyword_length=args.min_keyword_length,
        enable_insight_detection=False if args.no_insights else None,
    )

    print(f"Analyzing {min(len(comments), config.max_comments)} of {len(comments)} comments...")
    result = AnalysisRunner(timeout=args.timeout).run(comments, config)

    if args.out:
        export_to_json(prepare_export(result), args.out)
        print(f"Results exported to {args.out}")
    if args.csv_dir:
        paths = export_to_csv(result, args.csv_dir)
        print(f"CSV files written: {', '.join(str(p) for p in paths)}")

    sentiment = result.sentiment
    print(f"\nSentiment: {sentiment.positive_percentage}% positive, "
          f"{sentiment.negative_percentage}% negative, {sentiment.neutral_percentage}% neutral")

    if result.keywords:
        print("\nTop keywords:")
        for keyword in result.keywords[:10]:
            print(f"  {keyword.word}: {keyword.count} ({keyword.sentiment.value})")

    if result.insights:
        print("\nInsights:")
        for i, insight in enumerate(result.insights, 1):
            print(f"  {i}. [{insight.type.value}] {insight.title} "
                  f"(confidence {insight.confidence:.1f}, {insight.count} comments)")
    elif not result.is_empty:
        print("\nNo insights found")


def cmd_export(args):
    """Export command."""
    with open(args.input_file, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise MalformedCommentError(f"{args.input_file} is not a saved analysis result")

    if args.pretty:
        print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        source = Path(args.input_file)
        output_file = args.output or str(source.with_name(f"{source.stem}_export.json"))
        export_to_json(data, output_file)
        print(f"Exported to {output_file}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CommentInsight - Keyword, sentiment and insight analysis for comments")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze a JSON file of comments')
    analyze_parser.add_argument('--in', dest='input_file', required=True, help='Input JSON file of comments')
    analyze_parser.add_argument('--out', help='Output JSON file')
    analyze_parser.add_argument('--csv-dir', help='Directory for CSV output')
    analyze_parser.add_argument('--max-comments', type=int, help='Maximum comments to analyze')
    analyze_parser.add_argument('--top-keywords', type=int, help='Number of keywords to report')
    analyze_parser.add_argument('--min-keyword-length', type=int, help='Shortest keyword to keep')
    analyze_parser.add_argument('--no-insights', action='store_true', help='Skip insight detection')
    analyze_parser.add_argument('--timeout', type=float, help='Seconds allowed for the analysis')

    # Export command
    export_parser = subparsers.add_parser('export', help='Export analysis results')
    export_parser.add_argument('--in', dest='input_file', required=True, help='Input JSON file')
    export_parser.add_argument('--out', dest='output', help='Output file (optional)')
    export_parser.add_argument('--pretty', action='store_true', help='Pretty print to stdout')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging()

    try:
        if args.command == 'analyze':
            cmd_analyze(args)
        elif args.command == 'export':
            cmd_export(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2
    except (AnalysisError, OSError, json.JSONDecodeError) as e:
        logger.error(f"Command failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
