"""A browser history with back and forward navigation."""

from __future__ import annotations


class BrowserHistory:
    """Pages visited in one tab, with a cursor on the current page."""

    def __init__(self, homepage: str) -> None:
        self._pages: list[str] = [homepage]
        self._pos = 0
        self._last = 0

    def visit(self, url: str) -> None:
        """Open ``url`` after the current page, dropping any forward history."""
        self._pos += 1
        if self._pos == len(self._pages):
            self._pages.append(url)
        else:
            self._pages[self._pos] = url
        self._last = self._pos

    def back(self, steps: int) -> str:
        """Move back up to ``steps`` pages and return the page reached."""
        self._pos = max(0, self._pos - steps)
        return self._pages[self._pos]

    def forward(self, steps: int) -> str:
        """Move forward up to ``steps`` pages and return the page reached."""
        self._pos = min(self._last, self._pos + steps)
        return self._pages[self._pos]