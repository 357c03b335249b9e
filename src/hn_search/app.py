from __future__ import annotations

import logging
import webbrowser
from typing import Any, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.worker import Worker, WorkerState
from textual.widgets import (
    Header,
    Input,
    ListView,
    LoadingIndicator,
)

from .config import DEFAULT_CONFIG, HN_ITEM_URL, UI_DEFAULTS
from .datamodels import FetchFailure, RemoveStory, RequestState, Story
from .fetcher import FetchController
from .messages import StoriesUpdated
from .sources.hackernews import HackerNewsSource
from .store import StoryStore
from .trigger import SearchTrigger
from .widgets import ErrorMessage, StatusBar, StoryItem

logger = logging.getLogger("hn_search")


class SearchApp(App):
    TITLE = "HN Search"
    SUB_TITLE = "Hacker News stories, searched server-side"

    CSS_PATH = "app.css"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "refresh", "Refresh"),
        Binding("d", "remove_story", "Remove"),
        Binding("o", "open_story", "Open in browser"),
        Binding("/", "focus_search", "Search"),
    ]

    def __init__(
        self,
        theme: Optional[str] = None,
        config: Optional[dict[str, Any]] = None,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self.config = {**DEFAULT_CONFIG, **(config or {})}
        self._theme_name = theme or self.config.get("theme") or "dracula"
        self.live_search = self.config.get("search_mode") == "live"
        self.store = StoryStore()
        self.controller = FetchController(HackerNewsSource(self.config))
        self.trigger = SearchTrigger(self._start_search)

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main"):
            yield Input(
                value=self.config.get("initial_query") or "",
                placeholder="Search Hacker News...",
                id="search-input",
            )
            yield LoadingIndicator(id="search-loading")
            yield ErrorMessage(id="search-error")
            yield ListView(id="stories-list")
        yield StatusBar(
            UI_DEFAULTS["statusbar_keybindings"].format(color="$accent")
        )

    def on_mount(self) -> None:
        if self._theme_name in self.available_themes:
            self.theme = self._theme_name
        else:
            logger.warning("Theme '%s' not found, keeping default.", self._theme_name)
        self.query_one("#search-loading", LoadingIndicator).display = False
        self.query_one("#search-error", ErrorMessage).display = False
        self.store.subscribe(lambda state: self.post_message(StoriesUpdated(state)))

        # The first search runs on mount with the initial query.
        self.trigger.observe(self._current_query())
        self.query_one("#stories-list", ListView).focus()

    def _current_query(self) -> str:
        return self.query_one("#search-input", Input).value.strip()

    def _start_search(self, query: str) -> None:
        self.run_worker(
            self.controller.fetch_stories(query, self.store.dispatch),
            name="search_loader",
            group="search",
            exit_on_error=False,
        )

    async def on_stories_updated(self, message: StoriesUpdated) -> None:
        await self._render_state(message.state)

    async def _render_state(self, state: RequestState) -> None:
        query = self.trigger.query or ""
        self.query_one(StatusBar).show_state(state, query)

        error = self.query_one("#search-error", ErrorMessage)
        error.display = state.is_error
        if state.is_error:
            error.show_failure(query)
        self.query_one("#search-loading", LoadingIndicator).display = state.is_loading

        stories_list = self.query_one("#stories-list", ListView)
        previous_index = stories_list.index
        await stories_list.clear()
        if state.is_loading or not state.items:
            return

        await stories_list.extend(StoryItem(story) for story in state.items)
        # Keep the cursor on the same row so remove/open keep working.
        stories_list.index = min(previous_index or 0, len(state.items) - 1)

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        if getattr(event.worker, "name", None) != "search_loader":
            return
        if event.state is WorkerState.ERROR:
            logger.error("Search worker failed: %s", event.worker.error)
            # Never leave the view stuck on the loading indicator.
            if self.store.state.is_loading:
                self.store.dispatch(FetchFailure())

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search-input" and self.live_search:
            self.trigger.observe(event.value.strip())

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "search-input":
            self.trigger.observe(event.value.strip())
            self.query_one("#stories-list", ListView).focus()

    def _highlighted_story(self) -> Optional[Story]:
        item = self.query_one("#stories-list", ListView).highlighted_child
        if isinstance(item, StoryItem):
            return item.story
        return None

    def action_refresh(self) -> None:
        self.trigger.reset()
        self.trigger.observe(self._current_query())

    def action_remove_story(self) -> None:
        story = self._highlighted_story()
        if story:
            self.store.dispatch(RemoveStory(story.id))

    def action_open_story(self) -> None:
        story = self._highlighted_story()
        if story:
            webbrowser.open(story.url or f"{HN_ITEM_URL}{story.id}")

    def action_focus_search(self) -> None:
        self.query_one("#search-input", Input).focus()
