import inspect
import logging
import time
from functools import wraps

import pytest

logger = logging.getLogger(__name__)

# Element-level actions are only interesting in the report when they are slow.
TO_EXCLUDE = ['navigate', 'open_page', 'wait_for_page_load', 'click', 'fill', 'clear', 'select_option',
              'wait_until_hidden', 'wait_until_visible', 'wait_for_element']

SLOW_ACTION_SECONDS = 5
WARNING_SECONDS = 10


def track_execution_time(func):
    """
    Decorator to measure the execution time of page-object actions and fixtures
    and record them on the running pytest item for the HTML report.

    Functions in TO_EXCLUDE are only recorded if they take longer than SLOW_ACTION_SECONDS.
    Anything slower than WARNING_SECONDS is also logged as a warning.

    Args:
        func (callable): The function or fixture to wrap.

    Returns:
        callable: The wrapped function.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        item = getattr(pytest, 'current_item', None)
        if not item:
            return func(*args, **kwargs)

        if not hasattr(item, 'execution_log'):
            item.execution_log = []
        if not hasattr(item, 'call_stack'):
            item.call_stack = []

        function_name = func.__name__
        path = inspect.stack()[1].filename
        func_type = 'fixture' if 'conftest' in path else 'function'

        start_time = time.perf_counter()
        current_call = {'name': function_name, 'type': func_type, 'level': len(item.call_stack),
                        'start_time': start_time}
        item.call_stack.append(current_call)

        try:
            return func(*args, **kwargs)
        finally:
            execution_time = time.perf_counter() - start_time
            indent = '  ' * current_call['level']
            log_entry = f"{indent}{func_type} - {function_name}: {execution_time:.4f} seconds"

            if function_name not in TO_EXCLUDE or execution_time > SLOW_ACTION_SECONDS:
                # Element wrappers expose the selector they act on
                selector = getattr(args[0], 'selector', None) if args else None
                if function_name in TO_EXCLUDE and isinstance(selector, str):
                    log_entry = f"{indent}{func_type} - {function_name}({selector}): {execution_time:.4f} seconds"
                if execution_time > WARNING_SECONDS:
                    logger.warning("%s took over %s seconds to execute: %.4f seconds",
                                   function_name, WARNING_SECONDS, execution_time)
                item.execution_log.insert(0, (start_time, log_entry))

            item.call_stack.pop()

    return wrapper
