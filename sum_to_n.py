#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Triangular sum: 1 + 2 + ... + n, three ways.

Commands:
  verify [N ...]          Run all three implementations and check they agree
  calc N [--method a|b|c] Print sum_to_n(N) using one implementation

Notes:
- For n <= 0 every implementation returns 0 (empty range).
- Python ints are unbounded, so there is no overflow cap on n.
"""

import argparse
import sys
from functools import reduce

DEFAULT_CASES = (1, 2, 5, 10, 100, 1000)


def sum_to_n_a(n: int) -> int:
    """Closed form n(n+1)/2. O(1)."""
    if n <= 0:
        return 0
    return n * (n + 1) // 2


def sum_to_n_b(n: int) -> int:
    """Explicit loop. O(n) time, O(1) space."""
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def sum_to_n_c(n: int) -> int:
    """Fold over the range. O(n) time."""
    return reduce(lambda acc, i: acc + i, range(1, n + 1), 0)


METHODS = {"a": sum_to_n_a, "b": sum_to_n_b, "c": sum_to_n_c}


def verify_sum_to_n(cases=DEFAULT_CASES):
    rows = []
    for n in cases:
        a, b, c = sum_to_n_a(n), sum_to_n_b(n), sum_to_n_c(n)
        rows.append((n, a, b, c, a == b == c))
    return rows


# ---------------- CLI ----------------

def cmd_verify(args) -> int:
    rows = verify_sum_to_n(args.cases or DEFAULT_CASES)
    for n, a, b, c, ok in rows:
        print(f"n = {n}")
        print(f"sum_to_n_a: {a}")
        print(f"sum_to_n_b: {b}")
        print(f"sum_to_n_c: {c}")
        print(f"Results: {'PASS' if ok else 'FAIL'}\n")
    return 0 if all(r[4] for r in rows) else 1


def cmd_calc(args) -> int:
    print(METHODS[args.method](args.n))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Triangular sum 1..n")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("verify", help="compare the three implementations")
    sp.add_argument("cases", nargs="*", type=int)
    sp.set_defaults(func=cmd_verify)

    sp = sub.add_parser("calc", help="compute sum_to_n(N)")
    sp.add_argument("n", type=int)
    sp.add_argument("--method", choices=sorted(METHODS), default="a")
    sp.set_defaults(func=cmd_calc)
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
