from typing import Optional

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from therapy_directory.loading.state import DirectoryState
from therapy_directory.models.enums import LoadState
from therapy_directory.models.view import DirectoryView, FilterState

TITLE = "Therapy Directory"


def render_loading() -> RenderableType:
    return Text("Loading therapist directory...", style="grey50", justify="center")


def render_error(message: str) -> RenderableType:
    return Panel(Text(message, style="red", justify="center"), border_style="red")


def build_table(view: DirectoryView) -> Table:
    """One row per visible entry: name (with notes beneath), tags, clinic, address."""
    table = Table(title=TITLE, show_lines=True, header_style="bold")
    table.add_column("Name", no_wrap=True)
    table.add_column("Specialties")
    table.add_column("Location", no_wrap=True)
    table.add_column("Address", style="grey50")

    for entry in view.visible_entries:
        name = Text(entry.name, style="bold")
        if entry.notes:
            name.append(f"\n{entry.notes}", style="blue")
        tags = Text(" ").join(
            Text(f" {specialty} ", style="blue on grey93") for specialty in entry.specialties
        )
        table.add_row(name, tags, entry.location, entry.address)

    return table


def _describe_filters(view: DirectoryView, filters: FilterState) -> Text:
    return Text(
        f"Search: {filters.search or '-'}  |  "
        f"Specialty: {filters.specialty} ({len(view.specialty_options) - 1} available)  |  "
        f"Location: {filters.location} ({len(view.location_options) - 1} available)",
        style="grey50",
    )


def render_state(
    directory: DirectoryState, filters: Optional[FilterState] = None
) -> RenderableType:
    """Picks the renderable for the directory's current load state."""
    if directory.state == LoadState.LOADING:
        return render_loading()
    if directory.state == LoadState.ERROR:
        return render_error(directory.error or "")

    filters = filters or FilterState()
    view = directory.view(filters)
    return Group(_describe_filters(view, filters), build_table(view))
