# main.py
import argparse
import os
import sys
import time
from typing import Optional, Sequence
from core.color import Color
from core.vector import Vector3
from geometry.world import Scene
from renderer.raytracer import BACKENDS, Renderer
from scene.graph import Material, SceneNode, build_scene
from scene.obj_loader import load_obj
from scene.test_scene import create_test_scene

RENDER_PRESETS = {
    "preview": {"scale": 0.25},
    "draft": {"scale": 0.5},
    "final": {"scale": 1.0},
}

DEFAULT_CAMERA = (0.0, 3.0, 6.0)
DEFAULT_LOOK_AT = (0.0, 0.5, -1.0)

class Application:
    def __init__(self, width: int, height: int, preset: str = "final", backend: str = "python"):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        scale = RENDER_PRESETS[preset]["scale"]
        self.render_width = max(1, int(width * scale))
        self.render_height = max(1, int(height * scale))
        self.preset = preset
        self.renderer = Renderer(self.render_width, self.render_height, backend=backend)

    def create_world(self, model_path: Optional[str] = None, color: Optional[Color] = None) -> Scene:
        print("\n=== Creating World ===")
        if model_path:
            if not os.path.exists(model_path):
                raise FileNotFoundError(f"Model not found at {model_path}")
            mesh = load_obj(model_path)
            override = Material(color) if color is not None else None
            root = SceneNode("model", mesh=mesh, material_override=override)
        else:
            print("No model given, using the built-in test scene")
            root = create_test_scene()

        world = build_scene(root)
        print(f"World contains {len(world)} objects, {world.triangle_count} triangles")
        return world

    def run(self, world: Scene, camera_position: Vector3, look_at: Vector3, output: str):
        print("\n=== Rendering ===")
        print(f"Render resolution: {self.render_width}x{self.render_height} ({self.preset})")
        print(f"Backend: {self.renderer.backend}")
        print(f"Camera: {camera_position} -> {look_at}")

        start = time.perf_counter()
        image = self.renderer.render(camera_position, look_at, world)
        elapsed = time.perf_counter() - start
        print(f"Rendered in {elapsed:.2f}s")

        image.save(output)
        print(f"Saved image to {output}")
        return image

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a triangle scene with a flat-shaded ray tracer.")
    parser.add_argument("--width", type=int, default=320)
    parser.add_argument("--height", type=int, default=240)
    parser.add_argument("--preset", choices=sorted(RENDER_PRESETS), default="final")
    parser.add_argument("--backend", choices=BACKENDS, default="python")
    parser.add_argument("--model", help="Wavefront OBJ file; the test scene is used if omitted")
    parser.add_argument("--color", type=float, nargs=3, metavar=("R", "G", "B"),
                        help="Flat color for the model (default: white)")
    parser.add_argument("--camera", type=float, nargs=3, metavar=("X", "Y", "Z"), default=DEFAULT_CAMERA)
    parser.add_argument("--look-at", type=float, nargs=3, metavar=("X", "Y", "Z"), default=DEFAULT_LOOK_AT)
    parser.add_argument("--output", "-o", default="render.png")
    return parser.parse_args(argv)

def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        app = Application(args.width, args.height, args.preset, args.backend)
        color = Color(*args.color) if args.color else None
        world = app.create_world(args.model, color)
        app.run(world, Vector3(*args.camera), Vector3(*args.look_at), args.output)
    except Exception as e:
        print(f"Error during execution: {e}")
        import traceback
        traceback.print_exc()
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
