from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


# --- Data models ---
@dataclass(frozen=True)
class Story:
    id: str
    title: str
    url: str
    author: str
    points: int = 0
    num_comments: int = 0


@dataclass(frozen=True)
class RequestState:
    """Fetched stories plus the loading/error flags for one search."""

    items: Tuple[Story, ...] = ()
    is_loading: bool = False
    is_error: bool = False

    def __post_init__(self) -> None:
        if self.is_loading and self.is_error:
            raise ValueError("RequestState cannot be loading and failed at once")
        object.__setattr__(self, "items", tuple(self.items))


# --- Actions ---
@dataclass(frozen=True)
class FetchInit:
    pass


@dataclass(frozen=True)
class FetchSuccess:
    payload: Tuple[Story, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", tuple(self.payload))


@dataclass(frozen=True)
class FetchFailure:
    pass


@dataclass(frozen=True)
class RemoveStory:
    id: str


Action = Union[FetchInit, FetchSuccess, FetchFailure, RemoveStory]
