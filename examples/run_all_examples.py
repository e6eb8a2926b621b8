#!/usr/bin/env python3
"""
Run every example script and report which ones succeeded.
"""

import sys
import os
import subprocess
import time

EXAMPLES = [
    ("example_1_basic_product.py", "Example 1: Basic Lazy Cartesian Product"),
    ("example_random_sampling.py", "Example: Random Sampling from a Large Product"),
]


def run_example(script_name):
    """Run one example script; return (success, elapsed seconds, stderr)."""
    here = os.path.dirname(os.path.abspath(__file__))
    start = time.time()
    try:
        result = subprocess.run(
            [sys.executable, os.path.join(here, script_name)],
            cwd=os.path.dirname(here),
            capture_output=True,
            text=True,
            timeout=60,
        )
    except subprocess.TimeoutExpired:
        return False, time.time() - start, "Timeout after 60 seconds"
    elapsed = time.time() - start
    if result.returncode != 0:
        return False, elapsed, result.stderr
    for line in result.stdout.strip().split("\n")[-3:]:
        if line.strip():
            print(f"  {line}")
    return True, elapsed, None


def main():
    print("=" * 70)
    print("lazyproduct Example Scripts")
    print("=" * 70)

    failed = 0
    for script, description in EXAMPLES:
        print(f"\nRunning: {description}")
        success, elapsed, error = run_example(script)
        status = "Pass" if success else "Fail"
        print(f"{status:8} {script:40} ({elapsed:6.2f}s)")
        if not success:
            failed += 1
            print(f"         Error: {(error or '').strip()[-200:]}")

    print("-" * 70)
    print(f"Total: {len(EXAMPLES) - failed}/{len(EXAMPLES)} examples passed")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
