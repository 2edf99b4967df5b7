import sys
import time
from contextlib import contextmanager
from functools import wraps
from typing import List, Dict, Any, Callable, Iterator, Optional, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}


class _c:
    """terminal color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """assertion failure raised by assert_that / assert_raises."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


@contextmanager
def assert_raises(error_type: Type[BaseException], message: Optional[str] = None) -> Iterator[Dict[str, Any]]:
    """
    context manager asserting that the block raises error_type.
    the yielded dict receives the caught exception under 'error'.
    """
    caught: Dict[str, Any] = {'error': None}
    try:
        yield caught
    except error_type as e:
        caught['error'] = e
        return
    raise TestAssertionError(message or f"expected {error_type.__name__} to be raised")


def run(title: str = "test run") -> int:
    """executes all registered tests, prints a report and returns the failure count."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []

    for test_item in _suite_state['tests']:
        description = test_item['description']
        error = None

        try:
            test_item['func']()
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        _suite_state['results'].append({'passed': error is None, 'description': description, 'error': error})

        if error is None:
            print(f"  {_c.ok}pass{_c.reset}  {description}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {description}")
            print(f"    {_c.grey}-> {error}{_c.reset}")

    failed = _print_summary(start_time)

    # clear so several suites can run in one process
    _suite_state['tests'] = []
    return failed


def main(title: str) -> None:
    """run the registered tests and exit non-zero on failure."""
    sys.exit(1 if run(title) else 0)


def _print_summary(start_time: float) -> int:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count
