#!/usr/bin/env python3
"""
phongcast - A Python Ray Casting Renderer

Main entry point for rendering scenes. With no --output the image is
written to stdout as plain-text PPM; status goes to stderr.
"""

import argparse
import dataclasses
import logging
import sys
import time

from phongcast.camera import Camera
from phongcast.image_io import write_ppm
from phongcast.renderer import Renderer, RenderSettings
from phongcast.scene_parser import SceneParseError, load_scene
from phongcast.scenes import SCENES, get_scene
from phongcast.shading import ShadowPolicy


def status(message: str = '', **kwargs) -> None:
    print(message, file=sys.stderr, **kwargs)


def main(argv=None):
    """Main entry point.

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = argparse.ArgumentParser(
        description='phongcast - A Python Ray Casting Renderer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --scene 3 > scene3.ppm
  python main.py --scene 2 --shadow-policy ambient --output scene2.png
  python main.py --scene-file scene_files/spheres.yaml --output spheres.ppm
        '''
    )

    parser.add_argument('--width', type=int, default=None, help='Image width (default: 600)')
    parser.add_argument('--height', type=int, default=None, help='Image height (default: 337)')
    parser.add_argument('--scene', type=str, default='3', choices=list(SCENES),
                        help='Built-in scene to render (default: 3)')
    parser.add_argument('--scene-file', type=str, default=None,
                        help='YAML or JSON scene file (overrides --scene)')
    parser.add_argument('--shadow-policy', type=str, default=None,
                        choices=[p.value for p in ShadowPolicy],
                        help='Color of shadowed points (default: black)')
    parser.add_argument('--output', type=str, default=None,
                        help='Output filename (.ppm, .png, ...); stdout PPM if omitted')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
        stream=sys.stderr
    )

    # Create scene
    if args.scene_file:
        try:
            scene, camera, settings = load_scene(args.scene_file)
        except SceneParseError as e:
            status(f"Error: {e}")
            return 1
    else:
        scene = get_scene(args.scene)
        settings = RenderSettings()
        camera = None

    overrides = {}
    if args.width is not None:
        overrides['width'] = args.width
    if args.height is not None:
        overrides['height'] = args.height
    if args.shadow_policy is not None:
        overrides['shadow_policy'] = ShadowPolicy(args.shadow_policy)
    try:
        settings = dataclasses.replace(settings, **overrides)
    except ValueError as e:
        status(f"Error: {e}")
        return 1

    resized = args.width is not None or args.height is not None
    if camera is None:
        camera = Camera(aspect_ratio=settings.aspect_ratio) if resized else Camera()
    elif resized:
        # Keep the viewport's proportions in step with the new image size
        camera = Camera(
            origin=camera.origin,
            viewport_width=camera.viewport_width,
            aspect_ratio=settings.aspect_ratio,
            focal_length=camera.focal_length
        )

    status(f"Resolution: {settings.width}x{settings.height}")
    status(f"Objects in scene: {len(scene)}")

    renderer = Renderer(settings)

    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '█' * filled + '░' * (bar_len - filled)
            status(f'\rRendering: [{bar}] {pct}%', end='', flush=True)

    renderer.set_progress_callback(progress_callback)

    start_time = time.time()
    image = renderer.render(scene, camera)
    elapsed = time.time() - start_time
    status(f"\nRender completed in {elapsed:.2f} seconds")

    if args.output:
        renderer.save_image(image, args.output)
        status(f"Saved to: {args.output}")
    else:
        write_ppm(image, sys.stdout)

    return 0


if __name__ == '__main__':
    sys.exit(main())
