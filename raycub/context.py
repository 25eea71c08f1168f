"""A headless window context: settings, images, hooks and the frame loop."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from .image import Image, Texture, texture_to_image
from .renderqueue import DrawCall, remove_image_calls, sort_render_queue
from .utils import get_time


class Setting(IntEnum):
    """Global options read when a context is created or a frame is drawn."""

    STRETCH_IMAGE = 0
    FULLSCREEN = 1
    MAXIMIZED = 2
    DECORATED = 3
    HEADLESS = 4


_DEFAULTS = {
    Setting.STRETCH_IMAGE: 0,
    Setting.FULLSCREEN: 0,
    Setting.MAXIMIZED: 0,
    Setting.DECORATED: 1,
    Setting.HEADLESS: 0,
}
_settings: dict[Setting, int] = dict(_DEFAULTS)


def set_setting(setting: int, value: int) -> None:
    """Change a global setting; raise ValueError for an unknown setting."""
    _settings[Setting(setting)] = int(value)


def get_setting(setting: int) -> int:
    """Return the current value of a global setting."""
    return _settings[Setting(setting)]


class Key(IntEnum):
    """Keyboard key codes."""

    SPACE = 32
    A = 65
    D = 68
    S = 83
    W = 87
    ESCAPE = 256
    ENTER = 257
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265


class Action(IntEnum):
    """What happened to a key."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass(frozen=True)
class KeyData:
    """Information handed to a key hook."""

    key: int
    action: Action
    os_key: int = 0
    modifier: int = 0


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class Mlx:
    """A window context that keeps images, draw calls and hooks."""

    def __init__(
        self, width: int, height: int, title: str = "MLX42", resize: bool = False
    ) -> None:
        if title is None:
            raise TypeError("title can't be None")
        if width <= 0:
            raise ValueError("Window width must be positive")
        if height <= 0:
            raise ValueError("Window height must be positive")
        self.width = width
        self.height = height
        self.initial_width = width
        self.initial_height = height
        self.title = title
        self.resizable = bool(resize)
        self.maximized = bool(get_setting(Setting.MAXIMIZED))
        self.decorated = bool(get_setting(Setting.DECORATED))
        self.visible = not get_setting(Setting.HEADLESS)
        self.fullscreen = bool(get_setting(Setting.FULLSCREEN))
        self.delta_time = 0.0
        self.zdepth = 0
        self.images: list[Image] = []
        self._render_queue: list[DrawCall] = []
        self._hooks: list[Callable[[], None]] = []
        self._key_hook: Callable[[KeyData], None] | None = None
        self._close_hook: Callable[[], None] | None = None
        self._resize_hook: Callable[[int, int], None] | None = None
        self._keys_down: set[int] = set()
        self._should_close = False
        self._sort_queue = False
        self._last_time = 0.0
        self._matrix: list[float] | None = None
        self.terminated = False

    def __enter__(self) -> Mlx:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.terminate()

    # Images -----------------------------------------------------------

    def new_image(self, width: int, height: int) -> Image:
        """Create a blank image owned by this context."""
        image = Image(width, height)
        self.images.insert(0, image)
        return image

    def texture_to_image(self, texture: Texture) -> Image:
        """Create an image owned by this context holding a copy of texture."""
        image = texture_to_image(texture)
        self.images.insert(0, image)
        return image

    def image_to_window(self, image: Image, x: int, y: int) -> int:
        """Place a new instance of image at (x, y); return the instance index."""
        index = image.add_instance(x, y, self.zdepth)
        self.zdepth += 1
        self._render_queue.insert(0, DrawCall(image, index))
        self._sort_queue = True
        return index

    def set_instance_depth(self, image: Image, index: int, z: int) -> None:
        """Change the depth of one instance of image."""
        if image.set_instance_depth(index, z):
            self._sort_queue = True

    def delete_image(self, image: Image) -> None:
        """Remove image and all its draw calls from this context."""
        remove_image_calls(self._render_queue, image)
        self.images = [item for item in self.images if item is not image]

    # Hooks ------------------------------------------------------------

    def loop_hook(self, func: Callable[[], None]) -> bool:
        """Add a function called once per frame."""
        if func is None:
            raise TypeError("hook can't be None")
        self._hooks.append(func)
        return True

    def key_hook(self, func: Callable[[KeyData], None]) -> None:
        """Set the function called on every key event."""
        if func is None:
            raise TypeError("hook can't be None")
        self._key_hook = func

    def close_hook(self, func: Callable[[], None]) -> None:
        """Set the function called when the window is asked to close."""
        if func is None:
            raise TypeError("hook can't be None")
        self._close_hook = func

    def resize_hook(self, func: Callable[[int, int], None]) -> None:
        """Set the function called when the window size changes."""
        if func is None:
            raise TypeError("hook can't be None")
        self._resize_hook = func

    # Input and window -------------------------------------------------

    def send_key(self, key: int, action: int = Action.PRESS) -> None:
        """Deliver a key event to the context and its key hook."""
        action = Action(action)
        if action is Action.RELEASE:
            self._keys_down.discard(int(key))
        else:
            self._keys_down.add(int(key))
        if self._key_hook is not None:
            self._key_hook(KeyData(int(key), action))

    def is_key_down(self, key: int) -> bool:
        """Return True while key is held."""
        return int(key) in self._keys_down

    def close_window(self) -> None:
        """Ask the loop to stop after the current frame."""
        self._should_close = True

    def request_close(self) -> None:
        """Close the window as a user would, notifying the close hook."""
        self._should_close = True
        if self._close_hook is not None:
            self._close_hook()

    def should_close(self) -> bool:
        """Return True once the window has been asked to close."""
        return self._should_close

    def set_window_size(self, width: int, height: int) -> None:
        """Resize the window and notify the resize hook."""
        self.width = width
        self.height = height
        if self._resize_hook is not None:
            self._resize_hook(width, height)

    def set_window_title(self, title: str) -> None:
        """Change the window title."""
        if title is None:
            raise TypeError("title can't be None")
        self.title = title

    # Rendering --------------------------------------------------------

    def projection_matrix(self) -> list[float]:
        """Return the column-major view projection matrix for the window."""
        depth = float(self.zdepth)
        if get_setting(Setting.STRETCH_IMAGE):
            width, height = float(self.initial_width), float(self.initial_height)
        else:
            width, height = float(self.width), float(self.height)
        span = depth - -depth
        return [
            _divide(2.0, width), 0.0, 0.0, 0.0,
            0.0, _divide(2.0, -height), 0.0, 0.0,
            0.0, 0.0, _divide(-2.0, span), 0.0,
            -1.0, -_divide(height, -height), -_divide(depth + -depth, span), 1.0,
        ]

    def render_order(self) -> list[DrawCall]:
        """Return the draw calls that are drawn this frame, back to front."""
        if self._sort_queue:
            self._sort_queue = False
            self._render_queue = sort_render_queue(self._render_queue)
        return [
            call
            for call in self._render_queue
            if call.image.enabled and call.instance.enabled
        ]

    def run_frame(self) -> list[DrawCall]:
        """Run one frame: hooks, then rendering; return what was drawn."""
        start = get_time()
        self.delta_time = start - self._last_time
        self._last_time = start
        if self.width > 1 or self.height > 1:
            self._matrix = self.projection_matrix()
        for hook in self._hooks:
            if self._should_close:
                break
            hook()
        return self.render_order()

    def loop(self) -> None:
        """Run frames until the window is asked to close."""
        while not self._should_close:
            self.run_frame()

    def terminate(self) -> None:
        """Release every hook, draw call and image."""
        self._hooks.clear()
        self._render_queue.clear()
        self.images.clear()
        self._key_hook = self._close_hook = self._resize_hook = None
        self._keys_down.clear()
        self._should_close = True
        self.terminated = True