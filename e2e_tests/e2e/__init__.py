"""
End-to-end tests using Playwright.

browser.py holds the DriverConfig and BrowserSession used by every browser
test, scenarios.py the duplicate-post scenario built on them.

IMPORTANT: browser tests MUST NOT be run in parallel because of the
DJANGO_ALLOW_ASYNC_UNSAFE environment variable set by the test case base.
Use:
    pytest e2e_tests/ -n 0    # Explicitly disable parallel execution
    pytest e2e_tests/         # Or omit -n flag (defaults to sequential)

To run the duplicate-post scenario against an already running service:
    pytest e2e_tests/e2e/test_duplicate_post.py --app-host=http://localhost:8080
"""
