#!/usr/bin/env python3
"""
Solve every Sudoku puzzle file in a directory and print a summary.

Usage:
    python solve_all_puzzles.py [directory]
"""

import sys
import os
import glob

# Add the package directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sudoku_backtrack.grid import ParseGridError
from sudoku_backtrack.solver import InconsistentPuzzleError
from sudoku_backtrack.sudoku_solver import SudokuSolver


def main(argv=None):
    """Solve all .txt puzzles in the given directory (default: puzzles/)."""
    argv = sys.argv[1:] if argv is None else argv
    puzzle_dir = argv[0] if argv else "puzzles"
    puzzle_files = sorted(glob.glob(os.path.join(puzzle_dir, "*.txt")))

    if not puzzle_files:
        print(f"No .txt files found in {puzzle_dir}/!")
        return {'solved': [], 'unsolved': [], 'error': []}

    print(f"Found {len(puzzle_files)} puzzles to solve")
    print("=" * 60)

    solver = SudokuSolver(verbose=False)

    results = {
        'solved': [],
        'unsolved': [],
        'error': []
    }

    for i, puzzle_path in enumerate(puzzle_files, 1):
        print(f"\n[{i}/{len(puzzle_files)}] Solving {puzzle_path}...")

        try:
            result = solver.process_file(puzzle_path)
        except (OSError, UnicodeDecodeError, ParseGridError, InconsistentPuzzleError) as e:
            print(f"Error solving {puzzle_path}: {e}")
            results['error'].append(puzzle_path)
            continue

        if result['solved']:
            print(f"  ✓ {result['message']}")
            print(result['solution'])
            results['solved'].append(puzzle_path)
        else:
            print(f"  ✗ {result['message']}")
            results['unsolved'].append(puzzle_path)

    # Print summary
    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"✅ Solved:    {len(results['solved'])}/{len(puzzle_files)}")
    print(f"❌ Unsolved:  {len(results['unsolved'])}/{len(puzzle_files)}")
    print(f"⚠️  Errors:    {len(results['error'])}/{len(puzzle_files)}")

    if results['solved']:
        print(f"\nSolved puzzles: {', '.join(results['solved'])}")

    return results


if __name__ == '__main__':
    main()
