"""
report_handler.py

Handles result storage, aggregation and HTML rendering for the Swag Labs suite.
This module provides functionality for:
- Storing individual test results as JSON lines, one file per xdist worker
- Aggregating the worker files once the session is over
- Computing run statistics, per feature area and overall
- Rendering a single self-contained HTML report with jinja2

Classes:
    TestResult: Stores and manages individual test result data

Functions:
    save_test_result: Appends a test result to the worker's JSON lines file
    aggregate_results: Combines results from all worker files
    calculate_stats: Generates test execution statistics
    format_timestamp: Converts Unix timestamps to readable format
    get_pytest_metadata: Collects pytest and package version info
    analyze_slow_execution_logs: Finds page-object actions that are slow across tests
    generate_html_report: Creates the final HTML test report
"""
import importlib.metadata
import json
import platform
import re
import time
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Union

import jinja2
import pytest

TEMPLATE_DIR = Path(__file__).parent
TEMPLATE_NAME = "report_template.html"

# Markers naming the part of the shop a test covers
FEATURE_MARKERS = ("login", "home", "product", "cart", "checkout", "flow")

OUTCOMES = ("passed", "failed", "skipped", "error", "xfailed", "xpassed", "rerun")


class TestResult:
    """
    Stores and manages test result data including execution details, metadata and environment info.

    Attributes:
        timestamp (float): Test execution timestamp
        nodeid (str): Pytest node identifier
        outcome (str): Test result outcome (passed/failed/skipped etc)
        duration (float): Total duration of all phases in seconds
        phase_durations (dict): Duration of the setup, call and teardown phases
        description (str): Test docstring
        markers (list[str]): Applied pytest markers
        feature (str): Shop area the test covers, taken from its markers
        metadata (dict): Values of the ``meta`` marker plus reporting extras (end_url, xfail_reason)
        environment (dict): Python, platform and browser information
        screenshot (Optional[str]): Base64 JPEG captured on failure
        error (Optional[str]): Failure representation
        logs (list[str]): Test logs and timed page-object actions
        worker_id (str): xdist worker identifier
        location (str): Test file and line
    """
    __test__ = False

    def __init__(self, item: pytest.Item, outcome: str, duration: float, phase_durations: dict[str, float],
                 **kwargs) -> None:
        self.timestamp = kwargs.get('timestamp', time.time())
        self.nodeid = item.nodeid
        self.outcome = outcome
        self.duration = duration
        self.phase_durations = phase_durations
        self.description = (item.obj.__doc__ or "").strip()
        self.markers = [mark.name for mark in item.iter_markers()]
        self.feature = next((name for name in self.markers if name in FEATURE_MARKERS), "other")
        self.metadata = self._extract_metadata(item)
        self.environment = self._get_environment_info(item)
        self.screenshot: Optional[str] = None
        self.error: Optional[str] = None
        self.logs: list[str] = []
        self.exception_type = ""
        self.wasxfail: Optional[str] = None
        self.skip_reason: Optional[str] = None
        self.error_phase: Optional[str] = None
        self.execution_count: int = getattr(item, 'execution_count', 1)
        self.caplog: Optional[str] = None
        self.capstderr: Optional[str] = None
        self.capstdout: Optional[str] = None

        if hasattr(item.config, "workerinput"):
            self.worker_id = item.config.workerinput.get("workerid", "master")
        else:
            self.worker_id = "master"

        self.location = self._get_location(item)

    def _get_location(self, item: pytest.Item) -> str:
        file_path = self.nodeid.split("::")[0]
        code = getattr(getattr(item, "function", None), "__code__", None)
        line_number = getattr(code, "co_firstlineno", None)
        return f"{file_path}:{line_number}" if isinstance(line_number, int) else file_path

    @staticmethod
    def _get_environment_info(item: pytest.Item) -> dict[str, str]:
        """
        Collect environment information including browser details.

        Args:
            item: Pytest test item

        Returns:
            Dict containing environment information
        """
        env_info = {
            "python_version": platform.python_version(),
            "platform": platform.platform(),
        }

        page = item.funcargs.get("page")
        if page:
            try:
                browser = page.context.browser
                env_info.update({
                    "browser": browser.browser_type.name.capitalize(),
                    "browser_version": browser.version
                })
            except Exception:
                env_info.update({"browser": "Unknown", "browser_version": "Unknown"})
        return env_info

    @staticmethod
    def _extract_metadata(item: pytest.Item) -> dict[str, Any]:
        """
        Collect the keyword arguments of every ``meta`` marker on the test and its parametrize ids.

        Types passed as values (e.g. a page class) are stored by name so the result stays JSON-friendly.
        """
        metadata = {}
        for mark in item.iter_markers():
            if mark.name != "meta":
                continue
            for key, value in mark.kwargs.items():
                # Closer markers win, and iter_markers yields the closest first
                metadata.setdefault(key, value.__name__ if isinstance(value, type) else value)
        params = getattr(getattr(item, "callspec", None), "id", None)
        if isinstance(params, str):
            metadata.setdefault("params", params)
        return metadata

    def to_dict(self) -> dict[str, Any]:
        """
        Convert test result to dictionary for JSON serialization.
        """
        return {
            "timestamp": self.timestamp,
            "nodeid": self.nodeid,
            "outcome": self.outcome,
            "duration": self.duration,
            "phase_durations": self.phase_durations,
            "description": self.description,
            "markers": self.markers,
            "feature": self.feature,
            "metadata": self.metadata,
            "environment": self.environment,
            "screenshot": self.screenshot,
            "error": self.error,
            "logs": self.logs,
            "exception_type": self.exception_type,
            "wasxfail": self.wasxfail,
            "skip_reason": self.skip_reason,
            "worker_id": self.worker_id,
            "location": self.location,
            "error_phase": self.error_phase,
            "execution_count": self.execution_count,
            "caplog": self.caplog,
            "capstderr": self.capstderr,
            "capstdout": self.capstdout
        }


def save_test_result(result: TestResult, report_dir: Path) -> None:
    """
    Append a test result to the worker's JSON lines file.

    Each xdist worker writes its own file, so workers never share a file handle.

    Args:
        result: TestResult object to save
        report_dir: Directory to save report file
    """
    report_file = report_dir / f"worker_{result.worker_id}.json"
    with open(report_file, "a", encoding="utf-8") as f:
        json.dump(result.to_dict(), f)
        f.write("\n")


def aggregate_results(report_dir: Path) -> list[dict[str, Any]]:
    """
    Aggregate test results from all worker files.

    Args:
        report_dir: Directory containing result files

    Returns:
        List of test results from all workers, without duplicates

    Raises:
        AssertionError: If a file holds invalid JSON or a result misses a required field.
    """
    assert report_dir.exists(), f"Report directory does not exist: {report_dir}"

    seen_tests = set()
    unique_results = []

    for json_file in sorted(report_dir.glob("*.json")):
        with open(json_file, encoding="utf-8") as f:
            for line in f:
                if not line.strip():
                    continue
                try:
                    test = json.loads(line)
                except json.JSONDecodeError as e:
                    raise AssertionError(f"Invalid JSON in results file {json_file}: {e}") from e

                for key in ("nodeid", "timestamp", "outcome"):
                    assert key in test, f"Test result missing '{key}' in file {json_file}"

                unique_key = (test["nodeid"], test["timestamp"])
                if unique_key not in seen_tests:
                    seen_tests.add(unique_key)
                    unique_results.append(test)

    return unique_results


def calculate_stats(results: list[dict[str, Any]]) -> dict[str, Any]:
    """
    Calculate test statistics from results.

    Args:
        results: List of test results

    Returns:
        Dict with a count per outcome, run timing, the success rate and per-feature counts
    """
    stats: dict[str, Any] = {outcome: 0 for outcome in OUTCOMES}
    stats.update({"total": len(results), "start_time": 0, "end_time": 0, "total_duration": 0,
                  "success_rate": 0, "by_feature": {}})
    if not results:
        return stats

    for result in results:
        stats[result["outcome"]] = stats.get(result["outcome"], 0) + 1
        feature = stats["by_feature"].setdefault(result.get("feature", "other"),
                                                 {"total": 0, "passed": 0, "failed": 0})
        feature["total"] += 1
        if result["outcome"] == "passed":
            feature["passed"] += 1
        elif result["outcome"] in ("failed", "error"):
            feature["failed"] += 1

    stats["start_time"] = min(r["timestamp"] for r in results)
    stats["end_time"] = max(r["timestamp"] + (r.get("duration") or 0) for r in results)
    stats["total_duration"] = stats["end_time"] - stats["start_time"]
    stats["success_rate"] = round(stats["passed"] / len(results) * 100, 2)
    return stats


def format_timestamp(timestamp: float) -> str:
    """
    Convert Unix timestamp to readable format.
    """
    return time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(timestamp))


@lru_cache(maxsize=1)
def get_pytest_metadata() -> dict[str, Union[str, dict[str, str]]]:
    """
    Get version information for pytest and the packages the suite runs on.
    """
    metadata = {
        "pytest_version": pytest.__version__,
        "packages": {}
    }

    for package in ("pytest-xdist", "pytest-rerunfailures", "playwright", "jinja2", "psutil"):
        try:
            metadata["packages"][package] = importlib.metadata.version(package)
        except importlib.metadata.PackageNotFoundError:
            pass

    return metadata


LOG_ENTRY = re.compile(r'^\s*\w+ - (?P<name>[^:]+): (?P<seconds>\d+(?:\.\d+)?) seconds$')


def analyze_slow_execution_logs(results: list[dict[str, Any]], threshold_seconds: float = 10.0,
                                min_occurrences: int = 3) -> dict[str, int]:
    """
    Find page-object actions that were slow in several tests.

    Log lines are those written by ``track_execution_time``, e.g. ``function - login: 12.0031 seconds``.

    Args:
        results: List of test results
        threshold_seconds: Minimum execution time to count an action as slow
        min_occurrences: How many slow runs an action needs to be reported

    Returns:
        Action name mapped to the number of slow runs, most frequent first
    """
    frequency: dict[str, int] = {}
    for test in results:
        for log in test.get("logs") or []:
            match = LOG_ENTRY.match(log)
            if match and float(match.group("seconds")) > threshold_seconds:
                name = match.group("name").strip()
                frequency[name] = frequency.get(name, 0) + 1

    frequent = {name: count for name, count in frequency.items() if count >= min_occurrences}
    return dict(sorted(frequent.items(), key=lambda x: x[1], reverse=True))


def generate_html_report(session: pytest.Session, report_dir: Path) -> None:
    """
    Generate the final HTML report.

    Only the controlling process renders; xdist workers return straight away.

    Args:
        session: Pytest session object
        report_dir: Directory containing test results

    Raises:
        AssertionError: If the template cannot be rendered. An error page is written first.
    """
    if hasattr(session.config, "workerinput"):
        return

    report_path = Path(session.config.getoption("--html-report"))
    report_path.parent.mkdir(parents=True, exist_ok=True)

    results = aggregate_results(report_dir)
    if not results:
        report_path.write_text("<html><body><h1>No tests were run</h1></body></html>", encoding="utf-8")
        return

    stats = calculate_stats(results)
    stats["slow_functions"] = analyze_slow_execution_logs(results)

    for test in results:
        test["formatted_timestamp"] = format_timestamp(test["timestamp"])
    results.sort(key=lambda test: test["timestamp"])

    try:
        env = jinja2.Environment(loader=jinja2.FileSystemLoader(TEMPLATE_DIR),
                                 autoescape=jinja2.select_autoescape(["html"]))
        env.filters["format_timestamp"] = format_timestamp
        template = env.get_template(TEMPLATE_NAME)
        html_output = template.render(
            title=session.config.getoption("--report-title"),
            stats=stats,
            results=results,
            environment=results[0].get("environment", {}),
            metadata=get_pytest_metadata(),
            generated_at=time.strftime("%Y-%m-%d %H:%M:%S"),
        )
    except jinja2.exceptions.TemplateError as e:
        error_message = f"Template error when generating report: {e}"
        report_path.write_text(f"<html><body><h1>Error Generating Report</h1><p>{error_message}</p></body></html>",
                               encoding="utf-8")
        raise AssertionError(error_message) from e

    report_path.write_text(html_output, encoding="utf-8")
