from textual.message import Message

from .datamodels import RequestState


class StoriesUpdated(Message):
    """Posted after every dispatch with the store's new state."""
    def __init__(self, state: RequestState) -> None:
        self.state = state
        super().__init__()
