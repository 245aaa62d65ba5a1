"""Shared widget base.

Widgets set ``_default_classes`` to get a stable CSS hook without every
caller having to pass ``classes=``.
"""

from __future__ import annotations

from typing import ClassVar

from textual.widget import Widget


class BaseWidget(Widget):
    """Widget that tags itself with ``_default_classes`` on construction."""

    _default_classes: ClassVar[str] = ""

    def __init__(self, *children: Widget, id: str | None = None, classes: str = "") -> None:
        super().__init__(*children, id=id, classes=classes)
        if self._default_classes:
            self.add_class(*self._default_classes.split())
