"""Draw calls and ordering of the render queue."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable
from dataclasses import dataclass

from .image import Image, Instance

BATCH_SIZE = 12000
MAX_STRING = 512


@dataclass(eq=False)
class DrawCall:
    """A request to draw one instance of an image."""

    image: Image
    instance_id: int

    @property
    def instance(self) -> Instance:
        """The instance this call draws."""
        return self.image.instances[self.instance_id]

    def z(self) -> int:
        """Depth of the instance this call draws."""
        return self.instance.z


def sort_render_queue(queue: Iterable[DrawCall]) -> list[DrawCall]:
    """Return the draw calls ordered by ascending depth.

    Calls are inserted one at a time in queue order; a call goes in front
    of any call already placed with the same depth.
    """
    ordered: list[DrawCall] = []
    depths: list[int] = []
    for call in queue:
        depth = call.z()
        position = bisect_left(depths, depth)
        depths.insert(position, depth)
        ordered.insert(position, call)
    return ordered


def remove_image_calls(queue: list[DrawCall], image: Image) -> list[DrawCall]:
    """Remove every call drawing image from queue and return the removed calls."""
    removed = [call for call in queue if call.image is image]
    queue[:] = [call for call in queue if call.image is not image]
    return removed