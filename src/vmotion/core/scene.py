"""Frame driver: resolve, transform and draw objects one frame at a time.

Objects are evaluated in list order. An object may only reference objects
listed before it, because a symbol is looked up in the snapshot that the
earlier objects published for the same frame.
"""

import logging
from numbers import Number
from typing import Any, Callable, Iterable, Iterator, Optional
from pydantic import BaseModel, ConfigDict, Field

from .action import Action
from .geometry import ORIGIN, Point
from .painter import Painter
from .resolver import FrameSnapshot
from .settings import EngineSettings
from .state import GeometricState
from .surface import DrawingSurface
from .transitions import (
    InternalRotation,
    InternalTranslation,
    compute_transitions,
    perform_transformations,
)

logger = logging.getLogger("VectorMotion.core.scene")


class SceneObject(BaseModel):
    """A named drawable with its action and geometric state.

    ``draw(painter, frame)`` may return a ``Point`` (published as the
    object's position) or a number (published as its angle).
    """
    name: str
    draw: Callable[[Painter, int], Any] = Field(exclude=True)
    action: Action
    state: GeometricState = Field(default_factory=GeometricState)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def translation_total(self) -> Point:
        total = ORIGIN
        for internal in self.action.internal_transforms:
            if isinstance(internal, InternalTranslation):
                total = total + internal.by
        return total

    def rotation_total(self) -> float:
        return sum(
            internal.angle for internal in self.action.internal_transforms
            if isinstance(internal, InternalRotation)
        )


def _publish(obj: SceneObject, result: Any, snapshot: FrameSnapshot):
    position = result if isinstance(result, Point) else obj.translation_total()
    if isinstance(result, Number) and not isinstance(result, bool):
        angle = float(result)
    else:
        angle = obj.rotation_total()
    snapshot.publish(obj.name, position=position, angle=angle,
                     scale=obj.state.current_scale)


def render_object(obj: SceneObject, frame: int, surface: DrawingSurface,
                  snapshot: FrameSnapshot, settings: Optional[EngineSettings] = None):
    """Draw one object inside its own save/restore pair."""
    surface.save()
    try:
        obj.state.reset_transform()
        painter = Painter(surface, obj.state, settings=settings, opts=obj.action.opts)
        compute_transitions(obj.action, frame, snapshot)
        perform_transformations(obj.action, painter)
        result = None
        if obj.state.show_action:
            result = obj.draw(painter, frame)
        else:
            logger.debug(f"Skipping '{obj.name}' at frame {frame}: degenerate scale")
        _publish(obj, result, snapshot)
    finally:
        surface.restore()


def render_frame(objects: Iterable[SceneObject], frame: int, surface: DrawingSurface,
                 settings: Optional[EngineSettings] = None,
                 snapshot: Optional[FrameSnapshot] = None) -> FrameSnapshot:
    """Render every object active at ``frame``; returns the published snapshot."""
    snapshot = snapshot if snapshot is not None else FrameSnapshot()
    for obj in objects:
        if not obj.action.is_active(frame):
            continue
        render_object(obj, frame, surface, snapshot, settings=settings)
    return snapshot


def render_frames(objects: list[SceneObject], frames: Iterable[int],
                  surface_factory: Callable[[int], DrawingSurface],
                  settings: Optional[EngineSettings] = None) -> Iterator[tuple[int, DrawingSurface]]:
    """Render frames sequentially, one fresh surface and snapshot per frame."""
    for frame in frames:
        surface = surface_factory(frame)
        render_frame(objects, frame, surface, settings=settings)
        logger.debug(f"Rendered frame {frame}")
        yield frame, surface
