"""
Demo: Build tables for the example expressions and print their reports.
"""

from truthtable.examples import build_example_tables
from truthtable.analyzer import analyze_table
from truthtable.serialization import table_to_yaml


def print_report(report):
    """Pretty-print a TableReport."""
    print()
    print("=" * 70)
    print(f"TRUTH TABLE REPORT: {report.expression}")
    print("=" * 70)
    print()

    print("📊 BASIC METRICS")
    print(f"  {report.summary_line()}")
    print()

    print("🔎 RESULT COLUMN")
    print(f"  True Rows:             {report.true_rows}/{report.row_count}")
    print(f"  False Rows:            {report.false_rows}/{report.row_count}")
    print(f"  Classification:        {report.classification.value}")
    if report.satisfying_assignments and len(report.satisfying_assignments) <= 4:
        print("  Satisfying Assignments:")
        for assignment in report.satisfying_assignments:
            values = ", ".join(f"{var}={'V' if val else 'F'}" for var, val in assignment.items())
            print(f"    {values}")
    print()

    if report.warnings:
        print("⚠️  WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("✨ NO WARNINGS - Every column evaluated cleanly!")
    print()


if __name__ == "__main__":
    tables = build_example_tables()

    for expression, table in tables.items():
        print_report(analyze_table(table))

    # Also save the first table to YAML for inspection
    first = next(iter(tables.values()))
    with open("example_table_output.yaml", "w", encoding="utf-8") as f:
        f.write(table_to_yaml(first))
    print("✅ Table exported to example_table_output.yaml")
