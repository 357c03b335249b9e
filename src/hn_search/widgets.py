from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.reactive import reactive
from textual.widgets import ListItem, Static
from rich.text import Text

from .datamodels import RequestState, Story


def describe_state(state: RequestState, query: str) -> str:
    """One-line summary of a search for the status bar."""
    if state.is_loading:
        return f"Searching '{query}'..."
    if state.is_error:
        return f"Error loading stories for '{query}'."
    count = len(state.items)
    noun = "story" if count == 1 else "stories"
    return f"{count} {noun} for '{query}'"


# --- UI Widgets ---
class StoryItem(ListItem):
    def __init__(self, story: Story):
        super().__init__()
        self.story = story

    def compose(self) -> ComposeResult:
        with Horizontal(classes="story-container"):
            yield Static(self.story.title or "(untitled)", classes="story-title")
            yield Static(self.story.author, classes="story-author")
            yield Static(f"{self.story.points} pts", classes="story-points")
            yield Static(f"{self.story.num_comments} comments", classes="story-comments")


class StatusBar(Static):
    """Search progress on the left, key hints on the right."""

    summary = reactive("")

    def __init__(self, hint: str = "", **kwargs):
        super().__init__(**kwargs)
        self.hint = hint

    def on_mount(self) -> None:
        self.watch_summary(self.summary)

    def show_state(self, state: RequestState, query: str) -> None:
        self.summary = describe_state(state, query)

    def watch_summary(self, summary: str) -> None:
        self.update(" | ".join(part for part in (summary, self.hint) if part))


class ErrorMessage(Static):
    """Takes the place of the story list's spinner when a search fails."""

    def show_failure(self, query: str) -> None:
        self.update(Text(f"Failed to load stories for '{query}'.", style="bold red"))
