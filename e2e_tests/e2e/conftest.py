"""
Fixtures for end-to-end browser testing with Playwright and Django.

``DjangoPlaywrightTestCase`` runs the posts admin service on Django's
StaticLiveServerTestCase and gives every test its own ``BrowserSession``
pointed at that server. The session is opened in setUp and released by a
registered cleanup, so it is torn down even when the test body fails.
"""

import functools
import os
from contextlib import ExitStack
from unittest import SkipTest

import pytest
from django.contrib.staticfiles.testing import StaticLiveServerTestCase

from .browser import DriverConfig, open_session
from .errors import DriverError


@functools.lru_cache(maxsize=None)
def browser_unavailable_reason(config):
    """Return why ``config``'s browser cannot launch here, or None when it can."""
    try:
        with open_session(config):
            pass
    except DriverError as exc:
        if "Executable doesn't exist" in str(exc):
            return (
                f"Playwright {config.driver} is not installed "
                f"(run: playwright install {config.driver})"
            )
        raise
    return None


class DjangoPlaywrightTestCase(StaticLiveServerTestCase):
    """
    Base test case that combines Django's live server with a browser session.

    The browser comes from settings.E2E_BROWSER; a subclass may pin one by
    setting ``driver``.

    IMPORTANT: Sets DJANGO_ALLOW_ASYNC_UNSAFE in setUpClass so that ORM
    calls made by the test itself work while Playwright's event loop runs
    in the same thread. This affects the entire Python process; do not run
    these tests in parallel (pytest e2e_tests/ -n 0, or omit -n).
    """

    driver = None
    open_browser_session = True

    @classmethod
    def browser_config(cls, **overrides):
        if cls.driver is not None:
            overrides.setdefault("driver", cls.driver)
        return DriverConfig.from_settings(**overrides)

    @classmethod
    def setUpClass(cls):
        reason = browser_unavailable_reason(cls.browser_config())
        if reason:
            raise SkipTest(reason)
        os.environ["DJANGO_ALLOW_ASYNC_UNSAFE"] = "true"
        try:
            super().setUpClass()
        except Exception:
            os.environ.pop("DJANGO_ALLOW_ASYNC_UNSAFE", None)
            raise

    @classmethod
    def tearDownClass(cls):
        os.environ.pop("DJANGO_ALLOW_ASYNC_UNSAFE", None)
        super().tearDownClass()

    def setUp(self):
        super().setUp()
        self.config = self.browser_config(app_host=self.live_server_url)
        stack = ExitStack()
        self.addCleanup(stack.close)
        if self.open_browser_session:
            self.session = stack.enter_context(open_session(self.config))


@pytest.fixture
def app_host(request):
    """Base URL from --app-host, or skip when the option was not given."""
    host = request.config.getoption("--app-host")
    if not host:
        pytest.skip("pass --app-host=http://host:port to run against a deployed service")
    return host
