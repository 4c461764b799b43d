"""Page controller: the viewer's navigation state machine.

The state is the current library label, or None for the overview page.
Every navigation (initial load, resize, click) rebuilds the whole page:
tear down the old charts, clear the page and error slots, build the new
page, then rebuild the navigation list. A page that fails to build shows a
fixed message in the error slot; the failure is logged and never
propagates, so the rest of the report stays usable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from constants import CURRENT_PAGE_CLASS
from models import ReportData
from viewer.context import EngineContext
from viewer.document import Element
from viewer.drilldown import DrilldownHandler
from viewer.pages import build_library_page, build_overview_page

log = logging.getLogger(__name__)

OVERVIEW = None


class UnknownNavigationTarget(LookupError):
    """Navigation to a library label that is not in the report."""

    pass


@dataclass(frozen=True)
class NavEntry:
    label: str
    target: str | None
    active: bool


class PageController:
    """Drives page changes for one report session.

    Args:
        data: The report data set
        context: Engine context (document, colors, registry, backend)
        default_library: Library shown first instead of the overview

    Raises:
        UnknownNavigationTarget: If ``default_library`` is not in ``data``
    """

    def __init__(
        self,
        data: ReportData,
        context: EngineContext,
        default_library: str | None = None,
    ):
        if default_library is not None and not data.has_library(default_library):
            raise UnknownNavigationTarget(
                f"Default library '{default_library}' is not in the report. "
                f"Libraries are: {data.labels()}"
            )
        self.data = data
        self.context = context
        self.initial = default_library
        self.current: str | None = default_library
        self.drilldown: DrilldownHandler | None = None
        self.last_error: Exception | None = None

    def start(self) -> bool:
        """Show the initial page once the charting backend is ready."""
        return self.navigate(self.initial)

    def on_resize(self) -> bool:
        """Rebuild the current page from scratch."""
        return self.navigate(self.current)

    def navigate(self, target: str | None) -> bool:
        """Show the overview (``None``) or the detail page of library ``target``.

        Returns:
            True if the page was built, False if it fell back to the error message
        """
        document = self.context.document

        self.context.registry.teardown_all()
        self.drilldown = None
        document.page_content.clear()
        document.error_message.clear()
        self.current = target
        self.last_error = None

        try:
            if target is OVERVIEW:
                build_overview_page(self.context, self.data)
            else:
                if not self.data.has_library(target):
                    raise UnknownNavigationTarget(f"No library named '{target}' in the report")
                self.drilldown = build_library_page(self.context, self.data, target)
        except Exception as e:
            log.exception("Failed to display page %s", _describe(target))
            self.last_error = e
            document.error_message.text = self.context.config.error_message

        self._set_navigation()
        log.info("Navigated to %s", _describe(target))
        return self.last_error is None

    def navigation_entries(self) -> list[NavEntry]:
        """Overview entry followed by one entry per library, in data order."""
        entries = [
            NavEntry(self.context.config.overview_label, OVERVIEW, self.current is OVERVIEW)
        ]
        entries.extend(
            NavEntry(label, label, label == self.current) for label in self.data.labels()
        )
        return entries

    def _set_navigation(self) -> None:
        nav = self.context.document.navigation
        config = self.context.config
        nav.clear()
        nav.append(
            Element(
                tag="a",
                attrs={"href": config.homepage, "target": "_BLANK"},
                children=[Element(tag="h3", text=config.title)],
            )
        )
        for entry in self.navigation_entries():
            attrs = {} if entry.target is OVERVIEW else {"data-target": entry.target}
            nav.append(
                Element(
                    tag="span",
                    css_class=CURRENT_PAGE_CLASS if entry.active else "",
                    text=entry.label,
                    attrs=attrs,
                )
            )


def _describe(target: str | None) -> str:
    return "overview" if target is OVERVIEW else f"library '{target}'"
