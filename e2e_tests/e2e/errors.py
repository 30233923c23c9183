"""
Failures raised by the browser harness.

Three kinds reach the test runner and must stay distinguishable in its
report:

* ``ElementNotFound``: the page loaded but a named control is missing.
* ``AssertionMismatch``: every interaction worked but the page says the
  wrong thing. Subclasses ``AssertionError`` so pytest reports it as an
  ordinary assertion failure.
* ``DriverError``: the browser could not start, navigate or answer in time.
"""

# Page content beyond this many characters is cut from failure messages.
CONTENT_PREVIEW_CHARS = 500


class ScenarioError(Exception):
    """Base class for every harness failure."""


class ConfigurationError(ScenarioError, ValueError):
    """A DriverConfig value is unusable."""


class ElementNotFound(ScenarioError):
    def __init__(self, step, kind, identifier):
        self.step = step
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"could not find {kind} '{identifier}' (step: {step})")


class DriverError(ScenarioError):
    def __init__(self, step, cause):
        self.step = step
        self.cause = cause
        super().__init__(f"browser driver failed during {step}: {cause}")


class AssertionMismatch(ScenarioError, AssertionError):
    def __init__(self, pattern, content, expected=True):
        self.pattern = pattern
        self.content = content
        self.expected = expected
        if expected:
            summary = "expected error text not found"
        else:
            summary = "unexpected error text found"
        super().__init__(f"{summary}; got: {preview(content)} (pattern: {pattern!r})")


def preview(content, limit=CONTENT_PREVIEW_CHARS):
    """Shorten page content for a failure message."""
    if len(content) <= limit:
        return content
    return f"{content[:limit]}... [{len(content) - limit} more characters]"
