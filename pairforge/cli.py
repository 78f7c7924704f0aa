#!/usr/bin/env python3
"""
PairForge CLI - Generate synthetic instruction/answer pairs.

Usage:
    python -m pairforge --domain pharmacology --type instruction -n 5
    python -m pairforge --domain math --type qa -n 2 --model llama-3.2-3b-preview
    python -m pairforge --domain general -n 5 --eval       # Q/A evaluation set
    python -m pairforge --list-models
"""

import argparse
import sys

from .config import EXAMPLE_TYPE_LABELS, MAX_EXAMPLES, MODELS, get_model
from .export import filename_for, safe_filename, write_export
from .synthesis import EXAMPLE_TYPES, GenerationError, GenerationRequest, PairGenerator


def print_banner():
    """Print welcome banner."""
    print()
    print("=" * 60)
    print("  PairForge - Synthetic Instruction/Answer Pairs")
    print("=" * 60)
    print()


def format_models():
    """Format the model catalogue."""
    lines = ["\nAvailable models:"]
    for model_id, info in MODELS.items():
        lines.append(f"  • {model_id}: {info['display_name']} - {info['description']}")
    return "\n".join(lines)


def format_pairs(pairs, eval_mode: bool = False):
    """Format generated pairs for the terminal."""
    first = "Question" if eval_mode else "Instruction"
    lines = []
    for i, pair in enumerate(pairs, 1):
        lines.append(f"\n--- Pair {i} ---")
        lines.append(f"{first}: {pair.instruction}")
        lines.append(f"Answer: {pair.answer}")
    return "\n".join(lines)


def _num_examples(value: str) -> int:
    n = int(value)
    if n < 1 or n > MAX_EXAMPLES:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_EXAMPLES}")
    return n


def run_generate(args) -> int:
    """Run one generation and write the export file."""
    example_type = "qa" if args.eval else args.type
    variant = "eval" if args.eval else "train"

    print_banner()
    print(f"Domain: {args.domain}")
    print(f"Type:   {EXAMPLE_TYPE_LABELS[example_type]}")
    print(f"Count:  {args.num}")

    try:
        model = get_model(args.model)
    except ValueError as e:
        print(f"\nError: {e}")
        return 1

    print(f"Model:  {model.model_name}")
    print(f"\nGenerating {args.num} pairs ({2 * args.num} model calls)...")

    generator = PairGenerator(model)
    try:
        pairs = generator.generate(
            GenerationRequest(
                domain=args.domain,
                example_type=example_type,
                num_examples=args.num,
                model_id=model.model_name,
            )
        )
    except GenerationError as e:
        print(f"\nGeneration Failed: {e}. Please try again.")
        if args.debug and e.__cause__ is not None:
            print(f"   Cause: {e.__cause__}")
        return 1

    print(format_pairs(pairs, eval_mode=args.eval))

    output = args.output or safe_filename(filename_for(args.domain, example_type, variant))
    path = write_export(pairs, output, variant)
    print(f"\nGenerated {len(pairs)} pairs")
    print(f"Exported to: {path}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="PairForge - Synthetic training data from hosted LLMs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m pairforge --domain pharmacology --type instruction -n 5
  python -m pairforge --domain math --type qa -n 2 -o math.json
  python -m pairforge --domain general -n 5 --eval
"""
    )
    parser.add_argument("--domain", default="pharmacology", help="Subject area (default: pharmacology)")
    parser.add_argument("--type", default="instruction", choices=EXAMPLE_TYPES,
                        help="Example type (default: instruction)")
    parser.add_argument("-n", "--num", type=_num_examples, default=5,
                        help=f"Number of pairs, 1-{MAX_EXAMPLES} (default: 5)")
    parser.add_argument("--model", help="Model id (default: DEFAULT_MODEL or Llama 3.2 90B)")
    parser.add_argument("--eval", action="store_true",
                        help="Generate question/answer evaluation pairs")
    parser.add_argument("--output", "-o", help="Output path (.json, or .yaml/.yml)")
    parser.add_argument("--list-models", action="store_true", help="List available models")
    parser.add_argument("--debug", action="store_true", help="Show failure causes")

    args = parser.parse_args(argv)

    if args.list_models:
        print(format_models())
        return 0

    return run_generate(args)


if __name__ == "__main__":
    sys.exit(main())
