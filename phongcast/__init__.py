"""
phongcast - A Python Ray Casting Renderer

Renders static scenes of spheres and triangles with:
- Phong shading (ambient, diffuse, specular)
- Hard shadows from a directional or point light
- Plain-text PPM and PNG output
"""

__version__ = "0.1.0"
__author__ = "phongcast Team"

from .vec3 import Vec3, Point3, Color
from .ray import Ray, Hit
from .shapes import Primitive, Sphere, Triangle, T_EPSILON
from .materials import Material
from .lights import Light, LightSample, DirectionalLight, PointLight
from .scene import Scene
from .shading import ShadowPolicy, SHADOW_BIAS, in_shadow, surface_color
from .camera import Camera
from .renderer import Renderer, RenderSettings
from .image_io import quantize, write_ppm, save_image
from .scenes import get_scene, SCENES
from .scene_parser import SceneParser, SceneParseError, load_scene, parse_scene
