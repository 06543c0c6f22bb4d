# src/navigation/carousel.py
"""Which media item of the selected product is on screen."""
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from src.core.models import MediaFile


class CarouselState(BaseModel):
    model_config = ConfigDict(frozen=True)

    media: Tuple[MediaFile, ...] = ()
    current_index: int = 0
    is_fullscreen: bool = False
    is_playing: bool = False

    @property
    def current(self):
        if 0 <= self.current_index < len(self.media):
            return self.media[self.current_index]
        return None


def set_media(state: CarouselState, media) -> CarouselState:
    return CarouselState(media=tuple(media))


def next_slide(state: CarouselState) -> CarouselState:
    if state.current_index < len(state.media) - 1:
        return state.model_copy(update={"current_index": state.current_index + 1})
    return state


def previous_slide(state: CarouselState) -> CarouselState:
    if state.current_index > 0:
        return state.model_copy(update={"current_index": state.current_index - 1})
    return state


def go_to_slide(state: CarouselState, index: int) -> CarouselState:
    if 0 <= index < len(state.media):
        return state.model_copy(update={"current_index": index})
    return state


def toggle_fullscreen(state: CarouselState) -> CarouselState:
    return state.model_copy(update={"is_fullscreen": not state.is_fullscreen})


def set_fullscreen(state: CarouselState, is_fullscreen: bool) -> CarouselState:
    return state.model_copy(update={"is_fullscreen": is_fullscreen})


def set_playing(state: CarouselState, is_playing: bool) -> CarouselState:
    return state.model_copy(update={"is_playing": is_playing})


def reset(state: Optional[CarouselState] = None) -> CarouselState:
    return CarouselState()
