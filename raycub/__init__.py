"""Grid raycaster with a headless pixel-buffer window context and XPM42 textures."""

__version__ = "0.1.0"