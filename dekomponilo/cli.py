"""
Command-Line Interface for Dekomponilo.

Commands:
- decompose: Split one word into morphemes
- batch: Decompose a file of words (one per line) into JSON Lines
- serve: Answer JSON-Lines messages on stdin/stdout
- info: Show inventory statistics
"""
import sys
import argparse
import json
import logging

from dekomponilo.config import DecomposerConfig
from dekomponilo.inventory import InventoryError, load_inventory

logger = logging.getLogger(__name__)


def _build_config(args) -> DecomposerConfig:
    return DecomposerConfig.from_env().with_overrides(
        correction_scope=getattr(args, 'correction_scope', None)
    )


def cmd_decompose(args):
    """Decompose a single word."""
    from dekomponilo.decomposer import Decomposer
    from dekomponilo.rendering import format_segments, format_table
    from dekomponilo.trace import DecompositionTrace

    trace = DecompositionTrace(args.word) if args.trace else None

    try:
        morphemes = load_inventory(args.inventory)
    except InventoryError as e:
        if trace is not None:
            trace.set_error(str(e))
            print(trace.to_json())
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    result = Decomposer(morphemes, config=_build_config(args)).decompose(args.word, trace=trace)

    if trace is not None:
        print(trace.to_json())
    elif args.format == 'json':
        print(json.dumps(result.to_list(), indent=2, ensure_ascii=False))
    elif args.format == 'table':
        print(format_table(result))
    else:
        print(format_segments(result))

    return 1 if result.is_failure and args.strict else 0


def cmd_batch(args):
    """Decompose every word in a file, writing JSON Lines."""
    from tqdm import tqdm

    from dekomponilo.decomposer import Decomposer
    from dekomponilo.logging_config import ProgressLogger
    from dekomponilo.rendering import reconstruct

    try:
        morphemes = load_inventory(args.inventory)
        with open(args.file, 'r', encoding='utf-8') as f:
            words = [line.strip() for line in f if line.strip()]
        out = open(args.output, 'w', encoding='utf-8') if args.output else sys.stdout
    except (InventoryError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    decomposer = Decomposer(morphemes, config=_build_config(args))

    # tqdm for console, ProgressLogger for the log file
    progress_log = ProgressLogger(total=len(words), logger=logger)
    try:
        for word in tqdm(words, desc="Decomposing words", disable=args.output is None):
            result = decomposer.decompose(word)
            record = {
                "vorto": word,
                "sukceso": not result.is_failure,
                "dekomponaĵo": reconstruct(result.segments) if not result.is_failure else None,
                "segmentoj": result.to_list(),
            }
            out.write(json.dumps(record, ensure_ascii=False) + "\n")
            progress_log.update(failed=result.is_failure)
    finally:
        if out is not sys.stdout:
            out.close()

    logger.info(f"Batch done: {progress_log.done} words, {progress_log.failures} failures")
    return 0


def cmd_serve(args):
    """Answer one JSON message per stdin line with one JSON reply per stdout line."""
    from dekomponilo.worker import handle_message

    config = _build_config(args)
    for line in sys.stdin:
        line = line.strip()
        if not line:
            continue
        try:
            reply = handle_message(json.loads(line), config=config)
        except (json.JSONDecodeError, InventoryError) as e:
            logger.warning(f"Rejected message: {e}")
            reply = {"eraro": str(e)}
        sys.stdout.write(json.dumps(reply, ensure_ascii=False) + "\n")
        sys.stdout.flush()
    return 0


def cmd_info(args):
    """Display inventory statistics."""
    from dekomponilo.inventory import inventory_summary

    try:
        morphemes = load_inventory(args.inventory)
    except InventoryError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    summary = inventory_summary(morphemes)
    print(f"=== Inventory: {args.inventory} ===\n")
    for kind, count in summary.items():
        if kind != "total":
            print(f"  {kind}: {count}")
    print(f"\nTotal: {summary['total']}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dekomponilo',
        description='Dekomponilo: split Esperanto words into known morphemes',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dekomponilo decompose neniu -i data/komponentoj.json
  dekomponilo decompose malsanulejo -i data/komponentoj.json --format table
  dekomponilo batch -i data/komponentoj.json -f words.txt -o results.jsonl
  echo '{"vorto": "neniu", "komponentoj": [...]}' | dekomponilo serve
  dekomponilo info -i data/komponentoj.json
        """
    )
    parser.add_argument('--debug', action='store_true', help='Verbose (DEBUG) logging')
    parser.add_argument('--log-file', default=None, help='Also append logs to this file')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # --- decompose command ---
    parser_decompose = subparsers.add_parser('decompose', help='Decompose one word')
    parser_decompose.add_argument('word', help='Word to decompose')
    parser_decompose.add_argument('-i', '--inventory', required=True, help='Inventory file (.json or .jsonl)')
    parser_decompose.add_argument('--format', choices=['text', 'table', 'json'], default='text',
                                  help='Output format (default: text)')
    parser_decompose.add_argument('--trace', action='store_true', help='Print the execution trace as JSON')
    parser_decompose.add_argument('--strict', action='store_true', help='Exit with status 1 if no segmentation exists')
    parser_decompose.add_argument('--correction-scope', choices=['top', 'every'],
                                  help='Where the longer-root correction applies (default: top)')
    parser_decompose.set_defaults(func=cmd_decompose)

    # --- batch command ---
    parser_batch = subparsers.add_parser('batch', help='Decompose a file of words')
    parser_batch.add_argument('-i', '--inventory', required=True, help='Inventory file (.json or .jsonl)')
    parser_batch.add_argument('-f', '--file', required=True, help='Words file, one word per line')
    parser_batch.add_argument('-o', '--output', help='Output JSON Lines file (default: stdout)')
    parser_batch.add_argument('--correction-scope', choices=['top', 'every'],
                              help='Where the longer-root correction applies (default: top)')
    parser_batch.set_defaults(func=cmd_batch)

    # --- serve command ---
    parser_serve = subparsers.add_parser('serve', help='Answer JSON-Lines messages on stdin')
    parser_serve.add_argument('--correction-scope', choices=['top', 'every'],
                              help='Where the longer-root correction applies (default: top)')
    parser_serve.set_defaults(func=cmd_serve)

    # --- info command ---
    parser_info = subparsers.add_parser('info', help='Display inventory statistics')
    parser_info.add_argument('-i', '--inventory', required=True, help='Inventory file (.json or .jsonl)')
    parser_info.set_defaults(func=cmd_info)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    from dekomponilo.logging_config import setup_logging

    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command specified, show help
    if not args.command:
        parser.print_help()
        return 1

    # Console stays quiet unless a log file or --debug asks for more
    level = logging.INFO if args.log_file else logging.WARNING
    setup_logging(log_file=args.log_file, level=level, debug=args.debug)
    try:
        return args.func(args)
    except ValueError as e:
        # Invalid DEKOMPONILO_* settings
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
