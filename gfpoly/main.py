"""
gfpoly - Main Entry Point

This script provides an interactive tour of the toolkit:
    1. Polynomial multiplication over GF(4)
    2. Euclidean division
    3. Inversion modulo a polynomial
    4. Random test-data generation

Run with:
    python -m gfpoly.main            # interactive menu
    python -m gfpoly.main --quick    # run every demo once and exit
"""

import argparse
import logging

from gfpoly.common.field import GF4, field_elements
from gfpoly.common.polynomial import poly_from_numbers


def print_banner():
    """Print the toolkit banner."""
    print()
    print("╔" + "═" * 68 + "╗")
    print("║" + " " * 68 + "║")
    print("║" + " " * 24 + "GFPOLY TOOLKIT" + " " * 30 + "║")
    print("║" + " " * 68 + "║")
    print("║" + " " * 12 + "Polynomials and Inverses over Finite Fields" + " " * 13 + "║")
    print("║" + " " * 68 + "║")
    print("╚" + "═" * 68 + "╝")
    print()


def print_menu():
    """Print the main menu."""
    print("Available demos (all over GF(4) = {0, 1, α, α+1}, α^2 = α + 1):")
    print()
    print("  [1] Field tables")
    print("  [2] Multiplication")
    print("  [3] Division with remainder")
    print("  [4] Inversion modulo a polynomial")
    print("  [5] Random sampling")
    print("  [6] Quick demo (all of the above)")
    print()
    print("  [q] Quit")
    print()


def run_field_tables():
    """Print the GF(4) addition and multiplication tables."""
    print("\n" + "=" * 70)
    print("GF(4) TABLES")
    print("=" * 70)

    elements = field_elements(GF4)
    for title, op in (("+", GF4.add), ("×", GF4.mul)):
        print(f"\n{title:>5} " + "".join(f"{str(e):>5}" for e in elements))
        for a in elements:
            print(f"{str(a):>5} " + "".join(f"{str(op(a, b)):>5}" for b in elements))

    print("\nInverses:")
    for a in elements:
        print(f"  {str(a):>4}^-1 = {a.inverse()}")


def run_multiplication():
    """Multiply two fixed polynomials."""
    print("\n" + "=" * 70)
    print("MULTIPLICATION")
    print("=" * 70)

    p = poly_from_numbers(GF4, [0, 1, 2, 2, 3])
    q = poly_from_numbers(GF4, [3, 0, 1])
    print(f"\n  p     = {p}")
    print(f"  q     = {q}")
    print(f"  p × q = {p * q}")
    print(f"  deg(p × q) = {(p * q).degree} = {p.degree} + {q.degree}")


def run_division():
    """Divide with remainder, including division by zero."""
    print("\n" + "=" * 70)
    print("DIVISION")
    print("=" * 70)

    p = poly_from_numbers(GF4, [1, 0, 1, 2, 3])
    d = poly_from_numbers(GF4, [1, 2])
    q, r = p.div_mod(d)
    print(f"\n  p = {p}")
    print(f"  d = {d}")
    print(f"  quotient  = {q}")
    print(f"  remainder = {r}")
    print(f"  q × d + r == p: {q * d + r == p}")

    zero = poly_from_numbers(GF4, [])
    print(f"\n  p ÷ 0 -> {p.div_mod(zero)}")


def run_inversion():
    """Invert polynomials modulo a cubic."""
    print("\n" + "=" * 70)
    print("INVERSION")
    print("=" * 70)

    cases = [
        (poly_from_numbers(GF4, [1, 0, 1]), poly_from_numbers(GF4, [0, 1, 0, 2])),
        (poly_from_numbers(GF4, [1, 2]), poly_from_numbers(GF4, [0, 1, 1, 1])),
    ]
    for p, m in cases:
        inverse = p.invert(m)
        print(f"\n  p = {p}")
        print(f"  m = {m}")
        if inverse is None:
            print("  p has no inverse modulo m (common factor)")
        else:
            check = (p * inverse).div_mod(m)[1]
            print(f"  p^-1 mod m = {inverse}")
            print(f"  p × p^-1 mod m = {check}")


def run_sampling():
    """Run the sampling demo."""
    from gfpoly.sampling.demo import main as sampling_main

    sampling_main()


def run_quick_demo():
    """Run every demo once."""
    run_field_tables()
    run_multiplication()
    run_division()
    run_inversion()
    run_sampling()

    print("\n" + "=" * 70)
    print("QUICK DEMO COMPLETE")
    print("=" * 70)


DEMOS = {
    "1": run_field_tables,
    "2": run_multiplication,
    "3": run_division,
    "4": run_inversion,
    "5": run_sampling,
    "6": run_quick_demo,
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="gfpoly interactive demo")
    parser.add_argument("--quick", action="store_true",
                        help="run every demo once without the menu")
    parser.add_argument("--verbose", action="store_true",
                        help="log division and xgcd steps")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )
    print_banner()

    if args.quick:
        run_quick_demo()
        return

    while True:
        print_menu()

        choice = input("Enter your choice: ").strip().lower()

        if choice in DEMOS:
            DEMOS[choice]()
        elif choice == 'q':
            print("\nGoodbye!")
            break
        else:
            print("\nInvalid choice. Please try again.")

        print()
        input("Press Enter to continue...")
        print("\n" * 2)


if __name__ == "__main__":
    main()
