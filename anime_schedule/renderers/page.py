"""Host document with the loading, results and error regions."""

from dataclasses import dataclass, field
from pathlib import Path

from markupsafe import Markup

from ..constants.paths import INDEX_TEMPLATE_PATH, STYLESHEET_PATH

LOADING_REGION = "loading"
RESULTS_REGION = "anime-list-container"
ERROR_REGION = "error-message"

HIDDEN_CLASS = "hidden"

STYLESHEET_LINK = '<link rel="stylesheet" href="/static/style.css">'


@dataclass
class PageRegion:
    """One addressable region of the page."""
    region_id: str
    hidden: bool = True
    html: Markup = field(default_factory=Markup)

    @property
    def css_class(self) -> str:
        return HIDDEN_CLASS if self.hidden else ""


class PageDocument:
    """The page the orchestrator drives.

    Regions are toggled with show/hide and filled with set_html; to_html
    renders the current state into the index template.
    """

    def __init__(
        self,
        template_path: Path = INDEX_TEMPLATE_PATH,
        stylesheet_path: Path = STYLESHEET_PATH,
    ):
        self.template_path = template_path
        self.stylesheet_path = stylesheet_path
        self.regions = {
            region_id: PageRegion(region_id)
            for region_id in (LOADING_REGION, RESULTS_REGION, ERROR_REGION)
        }

    def region(self, region_id: str) -> PageRegion:
        try:
            return self.regions[region_id]
        except KeyError:
            raise KeyError(f"Unknown page region '{region_id}'") from None

    def show(self, region_id: str) -> None:
        self.region(region_id).hidden = False

    def hide(self, region_id: str) -> None:
        self.region(region_id).hidden = True

    def is_visible(self, region_id: str) -> bool:
        return not self.region(region_id).hidden

    def set_html(self, region_id: str, html: Markup) -> None:
        self.region(region_id).html = Markup(html)

    def to_html(self, inline_styles: bool = False) -> str:
        """Render the document with the current region state.

        With inline_styles the stylesheet is embedded so the page works as a
        standalone file; otherwise it links to the server's /static route.
        """
        with open(self.template_path, encoding="utf-8") as f:
            html = f.read()

        if inline_styles:
            with open(self.stylesheet_path, encoding="utf-8") as f:
                stylesheet = f"<style>\n{f.read()}</style>"
        else:
            stylesheet = STYLESHEET_LINK

        # Simple template substitution
        html = html.replace("{{ stylesheet }}", stylesheet)
        html = html.replace("{{ loading_class }}", self.region(LOADING_REGION).css_class)
        html = html.replace("{{ error_class }}", self.region(ERROR_REGION).css_class)
        html = html.replace("{{ results_class }}", self.region(RESULTS_REGION).css_class)
        html = html.replace("{{ results_html }}", str(self.region(RESULTS_REGION).html))

        return html
