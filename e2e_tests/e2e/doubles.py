"""
In-memory stand-ins for the Playwright sync API.

``FakePlaywright`` walks the same object graph as ``sync_playwright()``
(driver -> browser type -> browser -> context -> page -> locator) and
renders a minimal posts admin page from an ``AdminService``, so the
session and scenario code can be exercised without launching a browser.
"""

import re
from urllib.parse import urlparse

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

ADMIN_CONTROLS = frozenset({"new-post-name", "New Post"})


class AdminService:
    """Server side of the fake: stored posts plus knobs for failures."""

    def __init__(self, controls=ADMIN_CONTROLS, status=200, reachable=True):
        self.posts = []
        self.controls = set(controls)
        self.status = status
        self.reachable = reachable
        self.events = []

    def render(self, error=None):
        items = "".join(f"<li>{name}</li>" for name in self.posts)
        error_html = f'<p class="error">{error}</p>' if error else ""
        return f"<html><body>{error_html}<ul>{items}</ul></body></html>"

    def create(self, name):
        self.events.append(("create", name))
        if name in self.posts:
            return self.render(error="error: post already exists")
        self.posts.append(name)
        return self.render()


class FakeResponse:
    def __init__(self, status):
        self.status = status


class FakeLocator:
    def __init__(self, page, identifiers):
        self._page = page
        self._identifiers = tuple(identifiers)

    @property
    def first(self):
        return self

    def or_(self, other):
        return FakeLocator(self._page, self._identifiers + other._identifiers)

    def wait_for(self, state="visible", timeout=None):
        if not any(i in self._page.controls for i in self._identifiers):
            raise PlaywrightTimeoutError(
                f"Timeout {self._page.timeout}ms exceeded waiting for locator"
            )

    def fill(self, value):
        self._page.service.events.append(("fill", value))
        self._page.field_value = value

    def click(self):
        self._page.service.events.append(("click", self._identifiers[0]))
        self._page.submit()


class FakePage:
    def __init__(self, context):
        self.context = context
        self.service = context.service
        self.timeout = context.timeout
        self.controls = set()
        self.field_value = ""
        self._html = ""
        self.closed = False

    def goto(self, url):
        if not self.service.reachable:
            raise PlaywrightError(f"net::ERR_CONNECTION_REFUSED at {url}")
        path = urlparse(url).path
        self.service.events.append(("goto", path))
        if path == "/_admin/":
            self.controls = set(self.service.controls)
            self._html = self.service.render()
        else:
            self.controls = set()
            self._html = "<html><body>Not Found</body></html>"
        self.field_value = ""
        return FakeResponse(self.service.status)

    def locator(self, selector):
        return FakeLocator(self, re.findall(r'\[(?:name|id)="([^"]+)"\]', selector))

    def get_by_label(self, text, exact=False):
        return FakeLocator(self, [text])

    def get_by_role(self, role, name=None, exact=False):
        return FakeLocator(self, [name])

    def submit(self):
        self._html = self.service.create(self.field_value)

    def wait_for_load_state(self, state="load"):
        return None

    def content(self):
        return self._html

    def close(self):
        self.closed = True


class FakeContext:
    def __init__(self, browser, base_url):
        self.browser = browser
        self.service = browser.service
        self.base_url = base_url
        self.timeout = None
        self.pages = []
        self.closed = False

    def set_default_timeout(self, timeout):
        self.timeout = timeout

    def new_page(self):
        page = FakePage(self)
        self.pages.append(page)
        return page

    def close(self):
        self.closed = True
        self.browser.lifecycle.append(("close context", self.browser.contexts.index(self)))


class FakeBrowser:
    def __init__(self, service, headless, driver):
        self.service = service
        self.headless = headless
        self.driver = driver
        self.contexts = []
        self.lifecycle = []
        self.closed = False

    def new_context(self, base_url=None):
        context = FakeContext(self, base_url)
        self.contexts.append(context)
        self.lifecycle.append(("open context", len(self.contexts) - 1))
        return context

    def close(self):
        self.closed = True
        self.lifecycle.append(("close browser", None))


class FakeBrowserType:
    def __init__(self, name, playwright):
        self.name = name
        self._playwright = playwright

    def launch(self, headless=True):
        if self._playwright.launch_error is not None:
            raise PlaywrightError(self._playwright.launch_error)
        browser = FakeBrowser(self._playwright.service, headless, self.name)
        self._playwright.browsers.append(browser)
        return browser


class FakePlaywright:
    def __init__(self, service, launch_error=None):
        self.service = service
        self.launch_error = launch_error
        self.browsers = []
        self.stopped = False
        self.chromium = FakeBrowserType("chromium", self)
        self.firefox = FakeBrowserType("firefox", self)
        self.webkit = FakeBrowserType("webkit", self)

    def stop(self):
        self.stopped = True


class FakePlaywrightFactory:
    """Drop-in for ``sync_playwright``: ``factory().start()`` gives a driver."""

    def __init__(self, service=None, launch_error=None):
        self.service = service if service is not None else AdminService()
        self.launch_error = launch_error
        self.instances = []

    def __call__(self):
        return self

    def start(self):
        playwright = FakePlaywright(self.service, launch_error=self.launch_error)
        self.instances.append(playwright)
        return playwright

    @property
    def last(self):
        return self.instances[-1]
