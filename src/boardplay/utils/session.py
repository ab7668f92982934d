from __future__ import annotations

from typing import Type, TypeVar

from esper import World

from boardplay.components.board_descriptor import BoardDescriptor
from boardplay.components.palette import Palette
from boardplay.components.playback_state import PlaybackState
from boardplay.components.rendered_frame import RenderedFrame
from boardplay.components.snapshot_sequence import SnapshotSequence

T = TypeVar("T")


def _single(world: World, component_type: Type[T]) -> T:
    for _, component in world.get_component(component_type):
        return component
    raise RuntimeError(f"{component_type.__name__} not found in world")


def session_entity(world: World) -> int:
    for ent, _ in world.get_component(PlaybackState):
        return ent
    raise RuntimeError("PlaybackState not found in world")


def get_playback_state(world: World) -> PlaybackState:
    return _single(world, PlaybackState)


def get_board(world: World) -> BoardDescriptor:
    return _single(world, BoardDescriptor)


def get_sequence(world: World) -> SnapshotSequence:
    return _single(world, SnapshotSequence)


def get_palette(world: World) -> Palette:
    return _single(world, Palette)


def get_rendered_frame(world: World) -> RenderedFrame | None:
    for _, rendered in world.get_component(RenderedFrame):
        return rendered
    return None
