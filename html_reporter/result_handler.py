"""
result_handler.py

Turns the per-phase reports of pytest_runtest_makereport into one TestResult per test attempt.
Kept apart from conftest.py so the outcome rules can be unit tested with mocked pytest objects.
"""
import base64
import logging
from pathlib import Path
from typing import Any, Optional

import pytest
from _pytest.nodes import Item
from _pytest.reports import TestReport
from _pytest.runner import CallInfo
from playwright.sync_api import Page

from html_reporter.report_handler import TestResult, save_test_result

logger = logging.getLogger(__name__)

REPORT_DIR = Path("reports")

# Screenshots are embedded in the report, so only the first few failures get one
MAX_SCREENSHOTS = 5

PHASES = ('setup', 'call', 'teardown')


def is_failure(exc_type: Optional[type]) -> bool:
    """
    Assertion errors (AssertionMismatch included) and pytest.fail count as test failures;
    any other exception means the test could not run properly and is reported as an error.
    """
    return exc_type is not None and issubclass(exc_type, (AssertionError, pytest.fail.Exception))


class ResultHandler:
    """
    Tracks phase outcomes per test attempt and writes the final result once the attempt is over.

    State lives on the pytest config object, so one handler can be created per hook call.
    """

    def __init__(self, config: Any) -> None:
        self.config = config

        if not hasattr(self.config, '_shop_test_status'):
            self.config._shop_test_status = {}
        if not hasattr(self.config, '_shop_test_timing'):
            self.config._shop_test_timing = {}
        if not hasattr(self.config, 'screenshots_amount'):
            self.config.screenshots_amount = 0

    def process_test_result(self, item: Item, call: CallInfo, report: TestReport) -> None:
        """
        Record one phase report and, when the attempt is complete, save its TestResult.

        Args:
            item: The pytest test item being run
            call: Information about the test function call
            report: The pytest report object
        """
        status_key, status = self._get_test_status(item)
        self._track_phase_timing(report, status_key)

        status[report.when] = report.outcome
        if report.outcome == "failed" and call.excinfo and not is_failure(call.excinfo.type):
            status[report.when] = "error"

        if report.when == 'call' and hasattr(report, 'wasxfail'):
            status['xfail_status'] = 'xfailed' if report.outcome != 'passed' else 'xpassed'
            status['xfail_reason'] = report.wasxfail

        if self._is_test_complete(report, status) and not status['final_result_reported']:
            self._create_final_report(item, call, report, status, status_key)

        self._store_phase_report(item, report)

    def _track_phase_timing(self, report: TestReport, status_key: str) -> None:
        timing = self.config._shop_test_timing.setdefault(status_key, {
            'start_time': None,
            'total_duration': 0.0,
            'phase_durations': {phase: 0.0 for phase in PHASES}
        })

        start = getattr(report, 'start', None)
        if start is not None and (timing['start_time'] is None or start < timing['start_time']):
            timing['start_time'] = start

        duration = getattr(report, 'duration', None)
        if duration is not None:
            timing['phase_durations'][report.when] = duration
            timing['total_duration'] += duration

    def _get_test_status(self, item: Item) -> tuple[str, dict[str, Any]]:
        """
        Get or create the status record of the current attempt.

        Reruns get their own record, keyed by nodeid and execution count.
        """
        execution_count = getattr(item, 'execution_count', 1)
        status_key = f"{item.nodeid}:{execution_count}"
        status = self.config._shop_test_status.setdefault(status_key, {
            'setup': None,
            'call': None,
            'teardown': None,
            'final_result_reported': False,
            'execution_count': execution_count,
            'xfail_status': None
        })
        return status_key, status

    @staticmethod
    def _is_test_complete(report: TestReport, status: dict[str, Any]) -> bool:
        """
        An attempt is complete after teardown, after a failed setup or after a failed call.
        """
        return (
                report.when == 'teardown' or
                (report.when == 'setup' and report.outcome != 'passed') or
                (report.when == 'call' and status['setup'] == 'passed' and report.outcome != 'passed')
        )

    @staticmethod
    def _store_phase_report(item: Item, report: TestReport) -> None:
        execution_count = getattr(item, 'execution_count', 1)
        setattr(item, f"_report_{report.when}_{execution_count}", report)

    @staticmethod
    def _determine_outcome(report: TestReport, status: dict[str, Any]) -> tuple[str, Optional[str]]:
        """
        Combine the phase outcomes into one.

        Returns:
            tuple: (outcome, error_phase) where error_phase names the phase that failed, if any
        """
        if status['xfail_status']:
            return status['xfail_status'], 'call'

        for phase in PHASES:
            if status[phase] in ('failed', 'error'):
                return status[phase], phase

        if status['call'] == 'passed':
            return ('xpassed' if hasattr(report, 'wasxfail') else 'passed'), None
        if status['call'] == 'skipped' or status['setup'] == 'skipped':
            return ('xfailed' if hasattr(report, 'wasxfail') else 'skipped'), None

        return report.outcome, report.when if report.outcome == 'failed' else None

    def _create_final_report(self, item: Item, call: CallInfo, report: TestReport, status: dict[str, Any],
                             status_key: str) -> None:
        status['final_result_reported'] = True

        outcome, error_phase = self._determine_outcome(report, status)

        result = TestResult(item, outcome, getattr(report, 'duration', 0), {}, timestamp=report.start)
        result.error_phase = error_phase
        if 'xfail_reason' in status:
            result.wasxfail = status['xfail_reason']

        timing = self.config._shop_test_timing.get(status_key, {})
        if timing.get('start_time') is not None:
            result.timestamp = timing['start_time']
        if timing.get('phase_durations'):
            result.phase_durations = timing['phase_durations']
            result.duration = timing['total_duration']

        if outcome == 'skipped' and isinstance(getattr(report, 'longrepr', None), tuple):
            result.skip_reason = report.longrepr[-1].replace('Skipped: ', '')

        max_reruns = getattr(self.config.option, 'reruns', 0) or 0
        if status['execution_count'] <= max_reruns and outcome in ('failed', 'error'):
            result.outcome = "rerun"

        if result.outcome in ("failed", "error", "xfailed", "rerun"):
            self._process_error_info(item, report, result)

        self._collect_logs(item, result, status)
        save_test_result(result, self._get_report_dir())

    def _process_error_info(self, item: Item, report: TestReport, result: TestResult) -> None:
        """
        Attach the failure text, exception type, final URL and (outside reruns) a screenshot.
        """
        page = item.funcargs.get("page")
        if page is not None:
            if result.outcome != "rerun":
                self._capture_screenshot(page, result)
            result.metadata["end_url"] = page.url

        longrepr = getattr(report, "longrepr", None)
        if longrepr is not None:
            result.error = str(longrepr)
            reprcrash = getattr(longrepr, "reprcrash", None)
            if reprcrash is not None:
                result.exception_type = reprcrash.message.split(":", 1)[0]

    def _capture_screenshot(self, page: Page, result: TestResult) -> None:
        """
        Embed a viewport JPEG of the page in the result, up to MAX_SCREENSHOTS per session.
        """
        if self.config.screenshots_amount >= MAX_SCREENSHOTS:
            logger.info("Screenshot limit of %d reached, skipping %s", MAX_SCREENSHOTS, result.nodeid)
            return
        try:
            screenshot = page.screenshot(type="jpeg", quality=60, scale="css", full_page=False)
        except Exception as e:
            logger.warning("Failed to capture screenshot for %s: %s", result.nodeid, e)
            return
        result.screenshot = base64.b64encode(screenshot).decode("utf-8")
        self.config.screenshots_amount += 1

    @staticmethod
    def _collect_logs(item: Item, result: TestResult, status: dict[str, Any]) -> None:
        """
        Gather step logs, timed actions and captured output of every phase of the attempt.
        """
        result.logs = list(getattr(item, "test_logs", []))
        if hasattr(item, "execution_log"):
            result.logs.extend(entry for _, entry in sorted(item.execution_log, key=lambda x: x[0]))

        # Phase reports repeat the output of earlier phases, so identical content is kept once
        sections = {"caplog": [], "capstderr": [], "capstdout": []}
        seen = {attribute: set() for attribute in sections}
        for when in PHASES:
            phase_report = getattr(item, f"_report_{when}_{status['execution_count']}", None)
            if phase_report is None:
                continue
            for attribute, collected in sections.items():
                content = getattr(phase_report, attribute, "")
                if content and content.strip() and content not in seen[attribute]:
                    seen[attribute].add(content)
                    collected.append(f"--- {when} phase ---\n{content}")

        for attribute, collected in sections.items():
            setattr(result, attribute, "\n".join(collected) or None)

    @staticmethod
    def _get_report_dir() -> Path:
        REPORT_DIR.mkdir(exist_ok=True)
        return REPORT_DIR
