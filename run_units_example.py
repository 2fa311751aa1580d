#!/usr/bin/env python3
"""
Simple runner for the units_example.py script.

This script sets up the Python path to run the example without requiring
installation of the datasize package.
"""

import sys
from pathlib import Path


def main():
    """Run the units example with proper path setup."""
    project_root = Path(__file__).parent

    # Add the src directory to Python's import path
    sys.path.insert(0, str(project_root / "src"))

    try:
        from examples.units_example import main as example_main
    except ImportError as e:
        print(f"Error importing modules: {e}")
        print("\nTry one of these solutions:")
        print("- Install the package in development mode: pip install -e .")
        print("- Install the dependencies: babel and polars")
        return 1

    example_main()
    return 0


if __name__ == "__main__":
    sys.exit(main())
