"""
Scene description language parser.

Supports a YAML (or JSON) scene description format with:
- The light, ambient and background colors
- Materials library
- Objects (spheres and triangles with materials)
- Camera and render settings

Example scene file:
```yaml
light:
  direction: [1, 1, 1]
  color: [1, 1, 1]
ambient: [0.1, 0.1, 0.1]
background: [0.2, 0.2, 0.2]

materials:
  red:
    k_a: 0.1
    k_d: 0.8
    k_s: 0.8
    k_gls: 32
    o_d: [1, 0, 0]
    o_s: [0.5, 1, 0.5]

objects:
  - type: sphere
    center: [0.3, 0, -0.1]
    radius: 0.08
    material: red

  - type: triangle
    vertices: [[0.3, -0.3, -0.4], [0, 0.3, -0.1], [-0.3, -0.3, 0.2]]
    material:
      k_d: 0.9
      o_d: "#0000ff"

camera:
  origin: [0, 0, 1]
  viewport_width: 3
  focal_length: 1

render:
  width: 600
  height: 337
  shadow_policy: ambient
```
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, Any, List, Optional, Tuple
import json
import logging

import yaml

from .vec3 import Vec3, Point3, Color
from .camera import Camera
from .shapes import Primitive, Sphere, Triangle
from .materials import Material
from .scene import Scene
from .renderer import RenderSettings
from .shading import ShadowPolicy, SHADOW_BIAS

logger = logging.getLogger(__name__)

MATERIAL_KEYS = ('k_a', 'k_d', 'k_s', 'k_gls', 'reflectivity')


class SceneParseError(Exception):
    """Error during scene parsing."""
    pass


def _expect(data: Any, kind: type, what: str) -> Any:
    """Return data unchanged if it is a kind, else raise SceneParseError."""
    if not isinstance(data, kind):
        expected = 'mapping' if kind is dict else kind.__name__
        raise SceneParseError(f"{what} must be a {expected}, got: {data!r}")
    return data


def _to_float(value: Any, what: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise SceneParseError(f"{what} must be a number, got: {value!r}") from None


class SceneParser:
    """Parser for scene description files."""

    def __init__(self):
        self.materials: Dict[str, Material] = {}
        self.objects: List[Primitive] = []
        self.camera: Optional[Camera] = None
        self.settings: Optional[RenderSettings] = None

    def parse_file(self, filepath: str) -> Tuple[Scene, Camera, RenderSettings]:
        """Parse a scene file.

        Args:
            filepath: Path to the scene file (YAML or JSON)

        Returns:
            Tuple of (scene, camera, settings)
        """
        path = Path(filepath)
        if not path.exists():
            raise SceneParseError(f"Scene file not found: {filepath}")

        content = path.read_text()
        try:
            if path.suffix == '.json':
                data = json.loads(content)
            else:
                data = yaml.safe_load(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SceneParseError(f"Cannot read {filepath}: {e}") from e

        if not isinstance(data, dict):
            raise SceneParseError(f"Scene file must contain a mapping, got {type(data).__name__}")

        logger.debug("Loaded scene description from %s", path)
        return self.parse_dict(data)

    def parse_dict(self, data: Dict[str, Any]) -> Tuple[Scene, Camera, RenderSettings]:
        """Parse a scene from a dictionary.

        Args:
            data: Scene description dictionary

        Returns:
            Tuple of (scene, camera, settings)
        """
        # Parse materials first (objects reference them)
        if 'materials' in data:
            self._parse_materials(_expect(data['materials'], dict, "materials"))

        if 'objects' in data:
            self._parse_objects(_expect(data['objects'], list, "objects"))

        # Settings before camera, the camera takes its aspect ratio from them
        self._parse_settings(_expect(data.get('render', {}), dict, "render"))
        self._parse_camera(_expect(data.get('camera', {}), dict, "camera"))

        scene = self._parse_scene(data)
        logger.info("Parsed scene with %d objects, %d materials",
                    len(scene.objects), len(self.materials))
        return scene, self.camera, self.settings

    def _parse_vec3(self, data: Any) -> Vec3:
        """Parse a Vec3 from various formats."""
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise SceneParseError(f"Vec3 must have 3 components, got {len(data)}")
            return Vec3(*(_to_float(c, "Vec3 component") for c in data))
        elif isinstance(data, dict):
            return Vec3(
                _to_float(data.get('x', 0), "Vec3 x"),
                _to_float(data.get('y', 0), "Vec3 y"),
                _to_float(data.get('z', 0), "Vec3 z")
            )
        else:
            raise SceneParseError(f"Cannot parse Vec3 from: {data}")

    def _parse_color(self, data: Any) -> Color:
        """Parse a Color from various formats."""
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise SceneParseError(f"Color must have 3 components, got {len(data)}")
            return Color(*(_to_float(c, "Color component") for c in data))
        elif isinstance(data, dict):
            return Color(
                _to_float(data.get('r', 0), "Color r"),
                _to_float(data.get('g', 0), "Color g"),
                _to_float(data.get('b', 0), "Color b")
            )
        elif isinstance(data, str):
            # Handle hex colors
            if data.startswith('#'):
                hex_color = data[1:]
                if len(hex_color) == 6:
                    try:
                        r = int(hex_color[0:2], 16) / 255.0
                        g = int(hex_color[2:4], 16) / 255.0
                        b = int(hex_color[4:6], 16) / 255.0
                    except ValueError:
                        raise SceneParseError(f"Cannot parse color from string: {data}") from None
                    return Color(r, g, b)
            raise SceneParseError(f"Cannot parse color from string: {data}")
        else:
            raise SceneParseError(f"Cannot parse Color from: {data}")

    def _build_material(self, mat_data: Dict[str, Any]) -> Material:
        if not isinstance(mat_data, dict):
            raise SceneParseError(f"Material must be a mapping, got: {mat_data}")
        unknown = set(mat_data) - set(MATERIAL_KEYS) - {'o_d', 'o_s'}
        if unknown:
            raise SceneParseError(f"Unknown material fields: {', '.join(sorted(unknown))}")

        kwargs: Dict[str, Any] = {}
        for key in ('o_d', 'o_s'):
            if key in mat_data:
                kwargs[key] = self._parse_color(mat_data[key])

        for key in MATERIAL_KEYS:
            if key in mat_data:
                kwargs[key] = _to_float(mat_data[key], key)
        try:
            return Material(**kwargs)
        except ValueError as e:
            raise SceneParseError(str(e)) from e

    def _parse_materials(self, materials_data: Dict[str, Any]) -> None:
        """Parse materials section."""
        for name, mat_data in materials_data.items():
            self.materials[name] = self._build_material(mat_data)

    def _get_material(self, mat_ref: Any) -> Optional[Material]:
        """Get a material by name or inline definition."""
        if mat_ref is None:
            return None
        if isinstance(mat_ref, str):
            if mat_ref not in self.materials:
                raise SceneParseError(f"Unknown material: {mat_ref}")
            return self.materials[mat_ref]
        elif isinstance(mat_ref, dict):
            return self._build_material(mat_ref)
        else:
            raise SceneParseError(f"Invalid material reference: {mat_ref}")

    def _parse_objects(self, objects_data: list) -> None:
        """Parse objects section."""
        for obj_data in objects_data:
            _expect(obj_data, dict, "Object entry")
            obj_type = str(obj_data.get('type', 'sphere')).lower()
            material = self._get_material(obj_data.get('material'))

            if obj_type == 'sphere':
                center = self._parse_vec3(obj_data.get('center', [0, 0, 0]))
                radius = _to_float(obj_data.get('radius', 1.0), "Sphere radius")
                try:
                    self.objects.append(Sphere(center, radius, material))
                except ValueError as e:
                    raise SceneParseError(str(e)) from e

            elif obj_type == 'triangle':
                if 'vertices' in obj_data:
                    raw = obj_data['vertices']
                else:
                    try:
                        raw = [obj_data['v0'], obj_data['v1'], obj_data['v2']]
                    except KeyError as e:
                        raise SceneParseError(f"Triangle is missing vertex {e}") from None
                _expect(raw, list, "Triangle vertices")
                if len(raw) != 3:
                    raise SceneParseError(f"Triangle needs exactly 3 vertices, got {len(raw)}")
                vertices = [self._parse_vec3(v) for v in raw]
                self.objects.append(Triangle.from_vertices(vertices, material))

            else:
                raise SceneParseError(f"Unknown object type: {obj_type}")

    def _parse_scene(self, data: Dict[str, Any]) -> Scene:
        """Parse light, ambient and background into a Scene."""
        light_data = _expect(data.get('light', {}), dict, "light")
        light_position = None
        if 'position' in light_data:
            light_position = self._parse_vec3(light_data['position'])

        return Scene(
            direction_to_light=self._parse_vec3(light_data.get('direction', [0, 1, 0])),
            light_color=self._parse_color(light_data.get('color', [1, 1, 1])),
            ambient_light=self._parse_color(data.get('ambient', [0, 0, 0])),
            background_color=self._parse_color(data.get('background', [0.2, 0.2, 0.2])),
            objects=self.objects,
            light_position=light_position
        )

    def _parse_camera(self, camera_data: Dict[str, Any]) -> None:
        """Parse camera section."""
        origin = self._parse_vec3(camera_data.get('origin', [0, 0, 1]))
        viewport_width = _to_float(camera_data.get('viewport_width', 3.0), "viewport_width")
        aspect_ratio = _to_float(camera_data.get('aspect_ratio', self.settings.aspect_ratio), "aspect_ratio")
        focal_length = _to_float(camera_data.get('focal_length', 1.0), "focal_length")
        try:
            self.camera = Camera(origin, viewport_width, aspect_ratio, focal_length)
        except ValueError as e:
            raise SceneParseError(f"Invalid camera: {e}") from e

    def _parse_settings(self, settings_data: Dict[str, Any]) -> None:
        """Parse render settings section."""
        policy = settings_data.get('shadow_policy', ShadowPolicy.BLACK.value)
        try:
            self.settings = RenderSettings(
                width=int(settings_data.get('width', 600)),
                height=int(settings_data.get('height', 337)),
                shadow_policy=ShadowPolicy(str(policy).lower()),
                shadow_bias=float(settings_data.get('shadow_bias', SHADOW_BIAS))
            )
        except (TypeError, ValueError) as e:
            raise SceneParseError(f"Invalid render settings: {e}") from e


def load_scene(filepath: str) -> Tuple[Scene, Camera, RenderSettings]:
    """Convenience function to load a scene file.

    Args:
        filepath: Path to the scene file

    Returns:
        Tuple of (scene, camera, settings)
    """
    parser = SceneParser()
    return parser.parse_file(filepath)


def parse_scene(data: Dict[str, Any]) -> Tuple[Scene, Camera, RenderSettings]:
    """Convenience function to parse a scene from a dictionary.

    Args:
        data: Scene description dictionary

    Returns:
        Tuple of (scene, camera, settings)
    """
    parser = SceneParser()
    return parser.parse_dict(data)
