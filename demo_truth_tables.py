"""
Demo: Print the truth table of every secondary operator and check the laws.
"""

import argparse

from booltools.laws import check_laws
from booltools.serialization import truth_table_to_yaml
from booltools.truth_table import build_all_truth_tables


def print_table(table):
    """Pretty-print a TruthTable."""
    print(f"{table.operator.name} ({table.operator.value})")
    print("  a      rhs    output")
    for row in table.rows:
        print(f"  {str(row.a):<6} {str(row.rhs):<6} {row.output}")
    print()


def print_report(report):
    """Pretty-print a LawReport."""
    print("=" * 40)
    print(f"LAWS: {report.passed}/{report.checked} hold")
    print("=" * 40)
    for i, failure in enumerate(report.failures, 1):
        print(f"  {i}. {failure}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Show booltools truth tables")
    parser.add_argument("--yaml", action="store_true", help="Emit tables as YAML")
    args = parser.parse_args()

    tables = build_all_truth_tables()
    for table in tables.values():
        if args.yaml:
            print(truth_table_to_yaml(table))
        else:
            print_table(table)

    print_report(check_laws())
