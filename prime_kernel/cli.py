"""
Command-line entry point: runs the prime report and draws its figures.

Usage:
    prime-kernel
    prime-kernel --config config/custom.yaml --output-dir data/other
"""

import argparse
import time
from pathlib import Path

from .config import DEFAULT_CONFIG_PATH, load_config
from .runtime import init
from .layouts import ulam_coordinates, sacks_coordinates
from .report import run_prime_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Run the prime kernel report')
    parser.add_argument('--config', type=str, default=None,
                        help=f'Path to config file (default: {DEFAULT_CONFIG_PATH} if present)')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Override output_dir from the config')
    parser.add_argument('--no-figures', action='store_true',
                        help='Skip figure generation')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    init()
    config = load_config(args.config)
    if args.output_dir is not None:
        config['output_dir'] = args.output_dir
    if args.no_figures:
        config['figures'] = False

    print("=" * 60)
    print("Prime Kernel - Report")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  limit = {config['limit']:,}")
    print(f"  n_primes = {config['n_primes']:,}")
    print(f"  sample_size = {config['sample_size']}")
    print(f"  seed = {config['seed']}")
    print()

    output_dir = Path(config['output_dir'])
    total_start = time.time()

    print("-" * 60)
    print("1. Tables")
    print("-" * 60)
    start = time.time()
    results = run_prime_report(config, output_dir)
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    if config['figures']:
        # Imported here so table-only runs never load matplotlib
        from .plotting import (
            plot_prime_gaps,
            plot_prime_counting,
            plot_ulam_spiral,
            plot_sacks_spiral
        )

        print("-" * 60)
        print("2. Generating Figures")
        print("-" * 60)

        figures_dir = output_dir / 'figures'
        figures_dir.mkdir(parents=True, exist_ok=True)

        print("  - Prime gaps...")
        plot_prime_gaps(results['first_primes'], results['gaps'],
                        results['histogram'], figures_dir / 'prime_gaps.png')

        print("  - Prime counting function...")
        plot_prime_counting(results['counts'], figures_dir / 'prime_counting.png')

        print("  - Ulam spiral...")
        x, y = ulam_coordinates(config['limit'])
        plot_ulam_spiral(x, y, results['is_prime'][1:],
                         figures_dir / 'ulam_spiral.png')

        print("  - Sacks spiral...")
        x, y = sacks_coordinates(results['primes'])
        plot_sacks_spiral(x, y, figures_dir / 'sacks_spiral.png')
        print()

    total_time = time.time() - total_start
    print("=" * 60)
    print("COMPLETE")
    print("=" * 60)
    print(f"\nTotal runtime: {total_time:.1f}s")
    print(f"\nOutputs saved to: {output_dir.absolute()}")
    print(f"\nGenerated files:")
    for f in sorted(output_dir.glob('*.csv')):
        print(f"  - {f.name}")

    print("\n" + "=" * 60)
    print("KEY RESULTS")
    print("=" * 60)
    print(results['summary'].to_string(index=False))

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
