#!/usr/bin/env python3
# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Generates a batch of YULIDs and reports how evenly suffix characters are spread.

To use this script (with the yulid package installed in the active venv):
    ```bash
    ./suffix_distribution_report.py --prefix JNDE --count 100000
    ```
Exits with status 1 if any suffix position fails the chi-square uniformity check.
"""

import argparse
import logging
import sys

import numpy as np

from yulid.core.defaults import ALPHABET
from yulid.core.distribution import (
    CHI_SQUARE_CRITICAL_35DOF_P001,
    chi_square_per_position,
    non_uniform_positions,
    suffix_position_counts,
)
from yulid.core.utils import get_env_val_int, log_execution_time
from yulid.core.yulid_id import Yulid, is_valid
from yulid.core.yulid_logging import get_logger

_LOGGER = get_logger(__name__)


def main(argv=None) -> int:
    """Main function."""
    parser = argparse.ArgumentParser(
        description="Check the per-position distribution of generated YULID suffixes.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--prefix", default="JNDE", help="Prefix to generate identifiers for.")
    parser.add_argument(
        "--count",
        type=int,
        default=get_env_val_int("REPORT_SAMPLE_COUNT", 100_000),
        help="Number of identifiers to generate (env: YULID_REPORT_SAMPLE_COUNT).",
    )
    parser.add_argument(
        "--critical-value",
        type=float,
        default=CHI_SQUARE_CRITICAL_35DOF_P001,
        help="Chi-square value above which a position is reported as non-uniform.",
    )
    args = parser.parse_args(argv)

    if args.count <= 0:
        parser.error("--count must be positive")
    if not is_valid(f"{args.prefix}-AAAAAA"):
        parser.error(f"--prefix must be exactly four characters from {ALPHABET}")

    with log_execution_time(_LOGGER, f"Generating {args.count} YULIDs", level=logging.INFO):
        suffixes = [Yulid.new(args.prefix).suffix for _ in range(args.count)]

    counts = suffix_position_counts(suffixes)
    stats = chi_square_per_position(counts)

    print(f"{'Pos':<4} | {'Chi-square':<12} | {'Min':<8} | {'Max':<8} | {'Rarest':<6} | {'Commonest':<9}")
    print("-" * 62)
    for pos, row in enumerate(counts):
        print(
            f"{pos:<4} | "
            f"{stats[pos]:<12.2f} | "
            f"{row.min():<8} | "
            f"{row.max():<8} | "
            f"{ALPHABET[int(np.argmin(row))]:<6} | "
            f"{ALPHABET[int(np.argmax(row))]:<9}"
        )
    print("-" * 62)
    print(f"Expected per character and position: {args.count / len(ALPHABET):.1f}")

    failing = non_uniform_positions(counts, args.critical_value)
    if failing:
        print(f"Non-uniform positions (chi-square > {args.critical_value}): {failing}")
        return 1
    print("All positions look uniform.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
