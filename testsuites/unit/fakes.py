"""
In-memory stand-ins for the slice of the Playwright async API the page
objects use. No browser, no event loop tricks: every awaitable resolves
immediately and every interaction is recorded for assertions.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Union

from playwright.async_api import TimeoutError as PlaywrightTimeoutError


TextSource = Union[str, Callable[[], str], None]


class FakeLocator:
    """
    A locator that is either a single element or a list of elements.

    ``elements`` (list or zero-arg callable returning a list) makes this a
    multi-match locator; leave it None for a single element.
    """

    def __init__(
        self,
        text: TextSource = "",
        attributes: Optional[Dict[str, Any]] = None,
        elements: Union[List["FakeLocator"], Callable[[], List["FakeLocator"]], None] = None,
        children: Optional[Dict[str, "FakeLocator"]] = None,
        visible: Union[bool, Callable[[], bool]] = True,
        checked: bool = False,
        disabled: bool = False,
        value: str = "",
        on_click: Optional[Callable[["FakeLocator"], None]] = None,
        error: Optional[Exception] = None,
        evaluate_result: Any = None,
    ):
        self._text = text
        self.attributes = dict(attributes or {})
        self._elements = elements
        self.children = dict(children or {})
        self._visible = visible
        self.checked = checked
        self.disabled = disabled
        self.value = value
        self.on_click = on_click
        self.error = error
        self.evaluate_result = evaluate_result

        self.clicks: List[Dict[str, Any]] = []
        self.fills: List[str] = []
        self.waits: List[Dict[str, Any]] = []
        self.scrolled = 0

    # -- matching -----------------------------------------------------------

    def _all(self) -> List["FakeLocator"]:
        if self._elements is None:
            return [self]
        if callable(self._elements):
            return list(self._elements())
        return list(self._elements)

    @property
    def first(self) -> "FakeLocator":
        return self.nth(0)

    def nth(self, index: int) -> "FakeLocator":
        if self._elements is None:
            return self
        matched = self._all()
        return matched[index] if index < len(matched) else FakeLocator(elements=[])

    def locator(self, selector: str) -> "FakeLocator":
        return self.children.get(selector, FakeLocator(elements=[]))

    def filter(self, has_text: Optional[str] = None) -> "FakeLocator":
        matched = [e for e in self._all() if has_text is None or has_text in e.text]
        return FakeLocator(elements=matched)

    async def all(self) -> List["FakeLocator"]:
        return self._all()

    async def count(self) -> int:
        if self._elements is None:
            return 1
        return len(self._all())

    # -- state --------------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text() if callable(self._text) else (self._text or "")

    @property
    def visible(self) -> bool:
        return self._visible() if callable(self._visible) else self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        self._visible = value

    def _raise_if_broken(self) -> None:
        if self.error is not None:
            raise self.error

    async def text_content(self) -> Optional[str]:
        self._raise_if_broken()
        return self.text

    async def inner_text(self) -> str:
        self._raise_if_broken()
        return self.text

    async def all_text_contents(self) -> List[str]:
        self._raise_if_broken()
        return [e.text for e in self._all()]

    async def get_attribute(self, name: str) -> Optional[str]:
        self._raise_if_broken()
        return self.attributes.get(name)

    async def input_value(self) -> str:
        return self.value

    async def is_visible(self) -> bool:
        return bool(self._all()) and self.visible

    async def is_checked(self) -> bool:
        return self.checked

    async def is_disabled(self) -> bool:
        return self.disabled

    async def evaluate_all(self, expression: str) -> Any:
        return self.evaluate_result

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        self.waits.append({"state": state, "timeout": timeout})
        matched = self._all()
        if state == "attached" and not matched:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms waiting for attached")
        if state == "visible" and not (matched and matched[0].visible):
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms waiting for visible")

    # -- actions ------------------------------------------------------------

    async def click(self, **kwargs: Any) -> None:
        self.clicks.append(kwargs)
        if self.on_click:
            self.on_click(self)

    async def fill(self, value: str, **kwargs: Any) -> None:
        self.fills.append(value)
        self.value = value

    async def clear(self) -> None:
        self.value = ""

    async def scroll_into_view_if_needed(self) -> None:
        self.scrolled += 1


class FakePage:
    """Page double resolving selectors through a plain dict."""

    def __init__(self, selectors: Optional[Dict[str, FakeLocator]] = None, title: str = ""):
        self.selectors: Dict[str, FakeLocator] = dict(selectors or {})
        self.url = "about:blank"
        self._title = title
        self.handlers: Dict[str, List[Callable]] = {}
        self.timeouts: List[float] = []
        self.load_states: List[str] = []
        self.visited: List[Dict[str, Any]] = []
        self.screenshots: List[Dict[str, Any]] = []

    def add(self, selector: str, locator: FakeLocator) -> FakeLocator:
        self.selectors[selector] = locator
        return locator

    def locator(self, selector: str) -> FakeLocator:
        if selector in self.selectors:
            return self.selectors[selector]
        return FakeLocator(elements=[])

    def get_by_test_id(self, test_id: str) -> FakeLocator:
        return self.locator(f'[data-testid="{test_id}"]')

    def get_by_label(self, label: str) -> FakeLocator:
        return self.locator(f"label={label}")

    def get_by_placeholder(self, text) -> FakeLocator:
        return self.locator(f"placeholder={getattr(text, 'pattern', text)}")

    def get_by_role(self, role: str, name=None) -> FakeLocator:
        return self.locator(f"role={role}[name={getattr(name, 'pattern', name)}]")

    def on(self, event: str, handler: Callable) -> None:
        self.handlers.setdefault(event, []).append(handler)

    async def goto(self, url: str, wait_until: Optional[str] = None) -> None:
        self.url = url
        self.visited.append({"url": url, "wait_until": wait_until})

    async def title(self) -> str:
        return self._title

    async def wait_for_load_state(self, state: str = "load", timeout: Optional[float] = None) -> None:
        self.load_states.append(state)

    async def screenshot(self, path: Optional[str] = None, full_page: bool = False) -> bytes:
        self.screenshots.append({"path": path, "full_page": full_page})
        return b""

    async def wait_for_timeout(self, timeout: float) -> None:
        self.timeouts.append(timeout)


class FakeResponse:
    def __init__(self, url: str, status: int = 200):
        self.url = url
        self.status = status
