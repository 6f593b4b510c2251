"""Reporters for consistency check results."""

from neo4j_assertions.reports.console import ConsistencyConsoleReporter

__all__ = ["ConsistencyConsoleReporter"]
