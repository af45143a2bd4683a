"""
Renderer module.

Casts one primary ray per pixel, scanline by scanline, and collects the
radiance into a float64 image. Every pixel depends only on its ray and the
(read-only) scene, so rows can be rendered in any order.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Callable, Union
from pathlib import Path
import numpy as np

from .camera import Camera
from .scene import Scene
from .shading import ShadowPolicy, SHADOW_BIAS
from .image_io import overflow_mask, save_image

logger = logging.getLogger(__name__)


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    width: int = 600
    height: int = 337
    shadow_policy: ShadowPolicy = ShadowPolicy.BLACK
    shadow_bias: float = SHADOW_BIAS

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if isinstance(self.shadow_policy, str):
            self.shadow_policy = ShadowPolicy(self.shadow_policy.lower())

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


class Renderer:
    """Single-threaded ray casting renderer."""

    def __init__(self, settings: Optional[RenderSettings] = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def render_row(self, scene: Scene, camera: Camera, row: int) -> np.ndarray:
        """Render one scanline.

        Args:
            scene: The scene to render
            camera: The camera to render from
            row: Scanline index, 0 being the top of the image

        Returns:
            Array of shape (width, 3)
        """
        width = self.settings.width
        height = self.settings.height
        policy = self.settings.shadow_policy
        bias = self.settings.shadow_bias

        v = (height - 1 - row) / (height - 1) if height > 1 else 0.0
        line = np.zeros((width, 3), dtype=np.float64)

        for i in range(width):
            u = i / (width - 1) if width > 1 else 0.0
            ray = camera.get_ray(u, v)
            line[i] = ray.color(scene, policy, bias).to_array()

        return line

    def render(self, scene: Scene, camera: Camera) -> np.ndarray:
        """Render the scene and return the image as a numpy array.

        Args:
            scene: The scene to render
            camera: The camera to render from

        Returns:
            Unclamped image as numpy array of shape (height, width, 3),
            top scanline first
        """
        height = self.settings.height
        logger.info(
            "Rendering %dx%d, %d objects, shadow policy %s",
            self.settings.width, height, len(scene.objects),
            self.settings.shadow_policy.value
        )

        image = np.zeros((height, self.settings.width, 3), dtype=np.float64)
        for row in range(height):
            image[row] = self.render_row(scene, camera, row)
            if self._progress_callback:
                self._progress_callback((row + 1) / height)

        self._report_overflow(image)
        return image

    def _report_overflow(self, image: np.ndarray) -> None:
        mask = overflow_mask(image)
        count = int(mask.sum())
        if count == 0:
            return
        logger.warning(
            "%d of %d pixels exceed displayable range (peak %.3f); saturating on output",
            count, mask.size, float(image.max())
        )
        if logger.isEnabledFor(logging.DEBUG):
            for y, x in zip(*np.nonzero(mask)):
                logger.debug("Overflow at (%d, %d): %s", x, y, image[y, x])

    def save_image(self, image: np.ndarray, filename: Union[str, Path]) -> None:
        """Save image to file (see image_io.save_image)."""
        save_image(image, filename)
