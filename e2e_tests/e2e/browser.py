"""
Explicit browser configuration and session handle for the e2e suite.

A ``DriverConfig`` is built once and handed to ``open_session``; nothing in
this module keeps process-wide driver state, so two sessions with different
hosts or browsers can exist side by side.

    with open_session(DriverConfig(app_host="http://localhost:8080")) as session:
        session.visit("/_admin/")
        session.fill_in("new-post-name", with_="a test post!")
        session.click_button("New Post")
        html = session.html()

Leaving the ``with`` block tears the session down whether the body
returned, failed an assertion or raised.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from urllib.parse import urlparse

from django.conf import settings
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from .errors import ConfigurationError, DriverError, ElementNotFound

logger = logging.getLogger(__name__)

SUPPORTED_DRIVERS = ("chromium", "firefox", "webkit")
DEFAULT_APP_HOST = "http://localhost:8080"
DEFAULT_DRIVER = "chromium"
DEFAULT_TIMEOUT_MS = 10_000


@dataclass(frozen=True)
class DriverConfig:
    """Where the browser points and which browser it is."""

    app_host: str = DEFAULT_APP_HOST
    driver: str = DEFAULT_DRIVER
    headless: bool = True
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    def __post_init__(self):
        if self.driver not in SUPPORTED_DRIVERS:
            raise ConfigurationError(
                f"unknown browser driver {self.driver!r}; "
                f"expected one of {', '.join(SUPPORTED_DRIVERS)}"
            )
        parsed = urlparse(self.app_host)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(
                f"app_host must be an http(s) URL, got {self.app_host!r}"
            )
        if self.timeout_ms <= 0:
            raise ConfigurationError(
                f"timeout_ms must be positive, got {self.timeout_ms}"
            )

    @classmethod
    def from_settings(cls, **overrides):
        """Build a config from ``settings.E2E_BROWSER`` plus keyword overrides."""
        values = dict(getattr(settings, "E2E_BROWSER", {}))
        values.update(overrides)
        return cls(**values)

    def url_for(self, path):
        return f"{self.app_host.rstrip('/')}/{path.lstrip('/')}"


class BrowserSession:
    """One browser, one context, one page, owned by a single test."""

    def __init__(self, config, playwright_factory=sync_playwright):
        self.config = config
        self._playwright_factory = playwright_factory
        self._playwright = None
        self._browser = None
        self._context = None
        self._page = None

    @property
    def is_open(self):
        return self._page is not None

    @property
    def page(self):
        if self._page is None:
            raise DriverError("page access", "session is not open")
        return self._page

    def start(self):
        """Start the driver and launch the configured browser."""
        if self.is_open:
            raise DriverError("start", "session is already open")
        try:
            self._playwright = self._playwright_factory().start()
            browser_type = getattr(self._playwright, self.config.driver)
            self._browser = browser_type.launch(headless=self.config.headless)
            self._open_context()
        except PlaywrightError as exc:
            self.close()
            raise DriverError(f"launch {self.config.driver}", exc) from exc
        logger.info(
            "Opened %s session against %s (headless=%s)",
            self.config.driver,
            self.config.app_host,
            self.config.headless,
        )
        return self

    def _open_context(self):
        self._context = self._browser.new_context(base_url=self.config.app_host)
        self._context.set_default_timeout(self.config.timeout_ms)
        self._page = self._context.new_page()

    def visit(self, path):
        """Load ``path`` relative to the app host and wait for the page."""
        url = self.config.url_for(path)
        logger.debug("Visiting %s", url)
        try:
            response = self.page.goto(url)
        except PlaywrightError as exc:
            raise DriverError(f"visit {path}", exc) from exc
        if response is not None and response.status >= 500:
            raise DriverError(f"visit {path}", f"HTTP {response.status} from {url}")
        return response

    def fill_in(self, field, with_):
        """Set the value of the text input matched by name, id or label."""
        locator = self._field_locator(field)
        self._wait_for(locator, "fill_in", "field", field)
        try:
            locator.first.fill(with_)
        except PlaywrightError as exc:
            raise DriverError(f"fill_in {field}", exc) from exc

    def click_button(self, label):
        """Click the button whose accessible name is ``label``.

        Returns once any navigation the click started has loaded.
        """
        locator = self.page.get_by_role("button", name=label, exact=True)
        self._wait_for(locator, "click_button", "button", label)
        try:
            locator.first.click()
            self.page.wait_for_load_state("load")
        except PlaywrightError as exc:
            raise DriverError(f"click_button {label}", exc) from exc

    def html(self):
        """Full rendered HTML of the current page."""
        try:
            return self.page.content()
        except PlaywrightError as exc:
            raise DriverError("read page", exc) from exc

    def reset(self):
        """Drop cookies and storage by swapping in a fresh browser context."""
        if self._context is not None:
            self._context.close()
        self._context = None
        self._page = None
        if self._browser is not None:
            self._open_context()

    def close(self):
        """Release page, context, browser and driver. Safe to call twice."""
        for name in ("_page", "_context", "_browser"):
            resource = getattr(self, name)
            setattr(self, name, None)
            if resource is None:
                continue
            try:
                resource.close()
            except PlaywrightError:
                logger.warning("Closing %s failed", name.lstrip("_"), exc_info=True)
        if self._playwright is not None:
            playwright, self._playwright = self._playwright, None
            playwright.stop()
            logger.info("Closed %s session", self.config.driver)

    def _field_locator(self, field):
        quoted = field.replace("\\", "\\\\").replace('"', '\\"')
        by_attribute = self.page.locator(f'[name="{quoted}"], [id="{quoted}"]')
        return by_attribute.or_(self.page.get_by_label(field, exact=True))

    def _wait_for(self, locator, step, kind, identifier):
        try:
            locator.first.wait_for(state="visible")
        except PlaywrightTimeoutError as exc:
            raise ElementNotFound(step, kind, identifier) from exc
        except PlaywrightError as exc:
            raise DriverError(f"{step} {identifier}", exc) from exc


@contextmanager
def open_session(config=None, playwright_factory=sync_playwright):
    """Yield a started ``BrowserSession`` and always tear it down."""
    if config is None:
        config = DriverConfig.from_settings()
    session = BrowserSession(config, playwright_factory=playwright_factory)
    session.start()
    try:
        yield session
    finally:
        teardown(session)


def teardown(session):
    """Reset then release the session; runs on every exit path."""
    try:
        if session.is_open:
            session.reset()
    except PlaywrightError:
        logger.warning("Resetting the browser session failed", exc_info=True)
    finally:
        session.close()
