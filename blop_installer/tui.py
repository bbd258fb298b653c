"""Textual front-end.

The renderer is deliberately dumb: it draws the StepView of the active
screen and forwards button presses and list selections to the Wizard.
All navigation decisions live in the steps.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack, contextmanager
from typing import Iterator

from textual.app import App, ComposeResult, SuspendNotSupported
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen, Screen
from textual.widgets import Button, Footer, Header, OptionList, Static
from textual.widgets.option_list import Option

from .context import Notice, StepView
from .errors import HandoffError
from .wizard import Wizard

logger = logging.getLogger(__name__)

ACTION_PREFIX = "action-"


class StepScreen(Screen):
    def __init__(self, step_view: StepView) -> None:
        super().__init__()
        self.step_view = step_view

    def compose(self) -> ComposeResult:
        v = self.step_view
        yield Header()
        with Vertical(id="panel"):
            yield Static(f"[b]{v.title}[/b]\n", id="title")
            if v.text:
                yield Static(v.text, id="text", markup=False)
            if v.options:
                yield OptionList(*[Option(o) for o in v.options], id="options")
            with Horizontal(id="actions"):
                for a in v.actions:
                    yield Button(a.label, id=f"{ACTION_PREFIX}{a.action_id}")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith(ACTION_PREFIX):
            app: InstallerApp = self.app  # type: ignore
            app.handle_press(button_id[len(ACTION_PREFIX):])

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        app: InstallerApp = self.app  # type: ignore
        app.handle_select(self.step_view.options[event.option_index])


class NoticeScreen(ModalScreen[None]):
    BINDINGS = [("escape", "close", "Dismiss")]

    def __init__(self, notice: Notice) -> None:
        super().__init__()
        self.notice = notice

    def compose(self) -> ComposeResult:
        with Vertical(id="notice"):
            yield Static(f"[b]{self.notice.title}[/b]\n")
            yield Static(self.notice.message, markup=False)
            yield Button("Ok", id="dismiss", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._close()

    def action_close(self) -> None:
        self._close()

    def _close(self) -> None:
        # Clear the notice here: a result callback would be bound to the
        # StepScreen that was active when the notice was pushed, and that
        # screen may already have been replaced.
        app: InstallerApp = self.app  # type: ignore
        app.wizard.dismiss()
        self.dismiss()
        app.call_later(app.show_pending_notice)


class InstallerApp(App):
    TITLE = "BLOP - Arch Linux Installer"
    CSS = """
    #panel { border: round $accent; padding: 1 2; }
    #options { height: 1fr; }
    #actions { height: auto; margin-top: 1; }
    #actions Button { margin-right: 1; }
    NoticeScreen { align: center middle; }
    #notice { width: 64; height: auto; border: thick $error; background: $surface; padding: 1 2; }
    """
    BINDINGS = [("q", "quit", "Quit")]

    def __init__(self, wizard: Wizard) -> None:
        super().__init__()
        self.wizard = wizard
        # Interactive disk tools need the real terminal back.
        wizard.ctx.terminal_handoff = self.release_terminal

    @contextmanager
    def release_terminal(self) -> Iterator[None]:
        stack = ExitStack()
        try:
            stack.enter_context(self.suspend())
        except SuspendNotSupported as e:
            raise HandoffError("this terminal cannot be handed over to another program") from e
        with stack:
            yield

    def on_mount(self) -> None:
        self.push_screen(StepScreen(self.wizard.view()))

    def handle_press(self, action_id: str) -> None:
        self.wizard.press(action_id)
        self.sync()

    def handle_select(self, value: str) -> None:
        self.wizard.select(value)
        self.sync()

    def sync(self) -> None:
        """Redraw the active screen, then show the first pending notice."""

        self.switch_screen(StepScreen(self.wizard.view()))
        self.show_pending_notice()

    def show_pending_notice(self) -> None:
        notice = self.wizard.notice
        if notice is not None and not isinstance(self.screen, NoticeScreen):
            self.push_screen(NoticeScreen(notice))
