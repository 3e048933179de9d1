# main.py
import argparse
import sys
import time
from typing import List, Optional

from core.errors import ConfigurationError, TextureLoadError
from renderer.output import save_image
from renderer.raytracer import Renderer
from renderer.settings import QUALITY_LEVELS, RenderSettings
from renderer.tone_mapping import TONE_MAPPERS
from scenes import SCENES, build_scene

def parse_args(argv: Optional[List[str]] = None) -> RenderSettings:
    p = argparse.ArgumentParser(description="Monte-Carlo path tracer for sphere scenes.")
    p.add_argument('--scene', choices=sorted(SCENES), default='random')
    p.add_argument('--width', type=int, default=400)
    p.add_argument('--aspect', type=float, default=16.0 / 9.0, help='width / height')
    p.add_argument('--samples', type=int, default=None, help='samples per pixel')
    p.add_argument('--depth', type=int, default=None, help='maximum bounces per path')
    p.add_argument('--quality', choices=list(QUALITY_LEVELS), default='balanced',
                   help='preset for samples and depth; --samples/--depth override it')
    p.add_argument('--workers', type=int, default=1, help='worker processes')
    p.add_argument('--tile', type=int, default=16, help='tile edge in pixels')
    p.add_argument('--seed', type=int, default=None)
    p.add_argument('--tone-map', choices=sorted(TONE_MAPPERS), default='gamma')
    p.add_argument('--texture', default=None, help='image file for the earth scene')
    p.add_argument('--output', default='output/render.png')
    p.add_argument('--preview', action='store_true', help='show the result in a window')
    args = p.parse_args(argv)

    settings = RenderSettings(scene=args.scene, width=args.width, aspect_ratio=args.aspect,
                              workers=args.workers, tile=args.tile, seed=args.seed,
                              output=args.output, tone_map=args.tone_map,
                              texture=args.texture, preview=args.preview)
    settings.apply_quality(args.quality)
    if args.samples is not None:
        settings.samples_per_pixel = args.samples
    if args.depth is not None:
        settings.max_depth = args.depth
    return settings.validate()

def render(settings: RenderSettings):
    print("\n=== Creating World ===")
    scene = build_scene(settings.scene, seed=settings.seed, texture=settings.texture)
    camera = scene.make_camera(settings.aspect_ratio)
    print(f"Scene: {settings.scene} ({len(scene.world)} objects)")
    print(f"Camera position: {scene.look_from}, looking at {scene.look_at}")

    renderer = Renderer(settings.width, settings.height,
                        samples_per_pixel=settings.samples_per_pixel,
                        max_depth=settings.max_depth, workers=settings.workers,
                        tile=settings.tile, seed=settings.seed,
                        background=scene.background)

    print("\n=== Rendering ===")
    print(f"Render resolution: {renderer.width}x{renderer.height}")
    print(f"Samples per pixel: {renderer.samples_per_pixel}")
    print(f"Max bounces: {renderer.max_depth}")
    print(f"Workers: {renderer.workers}, tiles: {renderer.tile_count}")

    def report(done: int, total: int):
        print(f"\rTiles: {done}/{total} ({100 * done // total}%)", end="", flush=True)

    start = time.perf_counter()
    linear = renderer.render(camera, scene.world, progress=report)
    elapsed = time.perf_counter() - start
    print(f"\nRender time: {elapsed:.2f} s")

    pixels = TONE_MAPPERS[settings.tone_map](linear)
    path = save_image(pixels, settings.output)
    print(f"Saved {path}")
    return pixels

def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = parse_args(argv)
        pixels = render(settings)
    except (ConfigurationError, TextureLoadError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if settings.preview:
        from renderer.preview import show_image
        show_image(pixels, title=f"Ray Tracer - {settings.scene}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
