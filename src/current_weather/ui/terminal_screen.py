"""Rich-rendered terminal screen for the current-weather view state."""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.status import Status
from rich.table import Table
from rich.text import Text

from .models import WeatherViewState


class TerminalWeatherScreen:
    """Draws view states: a spinner while loading, then one result panel."""

    def __init__(self, *, console: Console) -> None:
        self.console = console
        self._status: Status | None = None
        self.last_state: WeatherViewState | None = None

    def render(self, state: WeatherViewState) -> None:
        self.last_state = state
        if state.loading:
            if self._status is None:
                self._status = self.console.status(state.trigger_text, spinner="dots")
                self._status.start()
            return

        if self._status is not None:
            self._status.stop()
            self._status = None

        panel = self.build_panel(state)
        if panel is not None:
            self.console.print(panel)

    def build_panel(self, state: WeatherViewState) -> Panel | None:
        """Return the panel for a settled state, or None when nothing is shown."""
        if state.error_visible:
            body = Text(state.error_text, style="bold red")
            if state.location_text:
                body = Text.assemble(body, "\n", Text(state.location_text, style="dim"))
            return Panel(body, title="Error", border_style="red")
        if not state.details_visible:
            return None

        table = Table.grid(padding=(0, 1))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("City", state.city_text)
        table.add_row("Temperature", Text(state.temperature_text, style="bold cyan"))
        table.add_row("Conditions", state.description_text)
        table.add_row("", state.feels_like_text)
        table.add_row("", state.humidity_text)
        table.add_row("", state.wind_text)
        return Panel(
            Group(Text(state.location_text, style="dim"), table),
            title="Current Weather",
            border_style="green",
        )
