"""Static HTML report generation.

Runs the page controller over every page of the report (overview first,
then each library in data order), snapshots the resulting document tree
and chart figures, and renders them into one self-contained Jinja2 page.
The embedded script switches pages client-side the same way the engine
does server-side: purge the old charts, plot the new ones, and swap the
drilldown pie when a category slice is clicked.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from charts import PlotlyBackend
from constants import ElementId
from models import ReportData
from utils import format_count
from viewer import OVERVIEW, EngineContext, NavEntry, PageController, ViewerConfig
from viewer.document import Element

log = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
PLOTLY_CDN_URL = "https://cdn.plot.ly/plotly-2.35.2.min.js"
OVERVIEW_KEY = "overview"


@dataclass
class PageSnapshot:
    """Everything the static page needs to show one page of the report."""

    key: str
    target: str | None
    title: str
    content: list[dict] = field(default_factory=list)
    figures: dict[str, dict] = field(default_factory=dict)
    drilldown: dict | None = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error


def page_key(target: str | None, index: int) -> str:
    """DOM-safe key for a page; library labels may contain any characters."""
    return OVERVIEW_KEY if target is OVERVIEW else f"lib{index}"


def snapshot_pages(
    data: ReportData, config: ViewerConfig
) -> tuple[list[PageSnapshot], list[NavEntry]]:
    """Build every page once and capture its document tree and figures.

    Returns:
        (page snapshots in navigation order, navigation entries)

    Raises:
        UnknownNavigationTarget: If ``config.default_library`` is not in ``data``
    """
    context = EngineContext(config=config, backend=PlotlyBackend())
    controller = PageController(data, context, default_library=config.default_library)

    targets = [OVERVIEW, *data.labels()]
    snapshots = []
    for index, target in enumerate(targets):
        controller.navigate(target)
        key = page_key(target, index)
        snapshot = PageSnapshot(
            key=key,
            target=target,
            title=config.overview_label if target is OVERVIEW else target,
            error=context.document.error_message.text,
        )
        for child in context.document.page_content.children:
            snapshot.content.append(_serialize(child, key, snapshot.figures))
        if controller.drilldown is not None:
            snapshot.drilldown = _drilldown_snapshot(controller, key)
        snapshots.append(snapshot)

    entries = controller.navigation_entries()
    context.registry.teardown_all()

    failed = [s.title for s in snapshots if not s.ok]
    if failed:
        log.warning("%d page(s) rendered with an error message: %s", len(failed), failed)
    return snapshots, entries


def _dom_id(key: str, element_id: str) -> str:
    return f"{key}__{element_id}"


def _serialize(element: Element, key: str, figures: dict[str, dict]) -> dict:
    """Element subtree as plain dicts; chart containers get a page-unique DOM id."""
    dom_id = _dom_id(key, element.element_id) if element.element_id else None
    figure = None
    if element.chart is not None and element.chart.is_drawn:
        if dom_id is None:
            dom_id = _dom_id(key, f"chart{len(figures)}")
        figure = json.loads(element.chart.to_json())
        figures[dom_id] = figure

    return {
        "tag": element.tag,
        "id": dom_id,
        "css_class": element.css_class,
        "text": element.text,
        "attrs": element.attrs,
        "chart": figure is not None,
        "children": [_serialize(child, key, figures) for child in element.children],
    }


def _drilldown_snapshot(controller: PageController, key: str) -> dict:
    """Pre-render the drilldown pie for every category that has one."""
    handler = controller.drilldown
    initial = handler.current
    figures = {}
    for drilldown in handler.analysis.drilldowns:
        handler.show(drilldown)
        figures[drilldown.label] = {
            "figure": json.loads(handler.chart.to_json()),
            "text": handler.label_element.text,
        }
    handler.show(initial)

    return {
        "parent": _dom_id(key, ElementId.RAW_SEQUENCE_ANALYSIS),
        "chart": _dom_id(key, ElementId.DRILLDOWN_CHART),
        "label": _dom_id(key, ElementId.DRILLDOWN_LABEL),
        "figures": figures,
    }


def _script_json(value) -> str:
    """JSON safe to place inside a <script> element."""
    return json.dumps(value, separators=(",", ":")).replace("</", "<\\/")


def _plotly_js(config: ViewerConfig) -> str | None:
    """Inline plotly.js source when embedding, None when loading from the CDN."""
    if config.include_plotlyjs != "embed":
        return None
    from plotly.offline import get_plotlyjs

    return get_plotlyjs()


def generate_html_report(
    data: ReportData,
    config: ViewerConfig | None = None,
    template_name: str = "report.html.j2",
    templates_dir: str | Path | None = None,
) -> str:
    """Generate the static HTML report for a data set.

    Args:
        data: Loaded report data
        config: Viewer configuration (defaults when None)
        template_name: Jinja2 template file name
        templates_dir: Override templates directory path

    Returns:
        Rendered HTML string

    Raises:
        UnknownNavigationTarget: If ``config.default_library`` is not in ``data``
    """
    config = config if config is not None else ViewerConfig()
    snapshots, entries = snapshot_pages(data, config)

    keys = {s.target: s.key for s in snapshots}
    initial = keys[config.default_library] if config.default_library is not None else OVERVIEW_KEY
    navigation = [
        {"label": entry.label, "key": keys[entry.target]} for entry in entries
    ]
    figures = {}
    for snapshot in snapshots:
        figures.update(snapshot.figures)
    drilldowns = {s.key: s.drilldown for s in snapshots if s.drilldown is not None}

    tpl_dir = Path(templates_dir) if templates_dir else TEMPLATES_DIR
    env = Environment(
        loader=FileSystemLoader(str(tpl_dir)),
        autoescape=True,
    )
    env.filters["format_count"] = format_count
    env.filters["script_json"] = _script_json

    template = env.get_template(template_name)
    html = template.render(
        config=config,
        batch=data.batch,
        pages=snapshots,
        navigation=navigation,
        initial_page=initial,
        figures=figures,
        drilldowns=drilldowns,
        plotly_js=_plotly_js(config),
        plotly_cdn_url=PLOTLY_CDN_URL,
    )

    log.info(
        "Generated HTML report for batch %s (%d pages, %d figures, %d chars)",
        data.batch.batch_name,
        len(snapshots),
        len(figures),
        len(html),
    )
    return html
