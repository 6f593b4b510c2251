"""Print the consistency report for the bundled assertions."""

import logging

from neo4j_assertions.consistency import default_checker
from neo4j_assertions.reports import ConsistencyConsoleReporter


def main():
    logging.basicConfig(level=logging.INFO)
    report = default_checker().run()
    ConsistencyConsoleReporter(verbosity=1).report(report)
    return 0 if report.passed else 1


if __name__ == "__main__":
    raise SystemExit(main())
