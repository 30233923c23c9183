"""
Duplicate-post scenario against the posts admin page.

Creating the same post twice must leave "error: post already exists" on
the page after the second submission. Each step is a blocking browser call
and the second create starts only after the first has been submitted and
the admin page reloaded, because the check depends on the first post being
stored server-side.
"""

import logging
import re

from playwright.sync_api import sync_playwright

from .browser import open_session
from .errors import AssertionMismatch

logger = logging.getLogger(__name__)

ADMIN_PATH = "/_admin/"
POST_NAME_FIELD = "new-post-name"
NEW_POST_BUTTON = "New Post"
DUPLICATE_ERROR = "error: post already exists"
DEFAULT_POST_NAME = "a test post!"


def create_post(session, name):
    """Load the admin page, submit ``name`` and return the resulting HTML."""
    session.visit(ADMIN_PATH)
    session.fill_in(POST_NAME_FIELD, with_=name)
    session.click_button(NEW_POST_BUTTON)
    return session.html()


def assert_page_matches(content, pattern):
    if re.search(pattern, content) is None:
        raise AssertionMismatch(pattern, content)


def assert_page_lacks(content, pattern):
    if re.search(pattern, content) is not None:
        raise AssertionMismatch(pattern, content, expected=False)


def run_duplicate_post_scenario(
    session, post_name=DEFAULT_POST_NAME, pattern=DUPLICATE_ERROR
):
    """Create ``post_name`` twice and check the page for ``pattern``.

    Returns the final page HTML. Raises ElementNotFound, DriverError or
    AssertionMismatch; none of them is retried here.
    """
    logger.info("Creating post %r (first submission)", post_name)
    create_post(session, post_name)

    logger.info("Creating post %r again (second submission)", post_name)
    content = create_post(session, post_name)

    assert_page_matches(content, pattern)
    logger.info("Duplicate post was rejected with %r", pattern)
    return content


def duplicate_post_test(
    config=None,
    post_name=DEFAULT_POST_NAME,
    pattern=DUPLICATE_ERROR,
    playwright_factory=sync_playwright,
):
    """Run the scenario in its own browser session, torn down on exit."""
    with open_session(config, playwright_factory=playwright_factory) as session:
        return run_duplicate_post_scenario(
            session, post_name=post_name, pattern=pattern
        )
