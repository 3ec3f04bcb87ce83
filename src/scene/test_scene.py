# scene/test_scene.py
from core.color import Color
from core.transform import Transform
from scene.graph import Material, Mesh, SceneNode

# Unit cube centered on the origin, counter-clockwise faces seen from outside.
CUBE_VERTICES = [
    (-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5),
    (-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5),
]
CUBE_INDICES = [
    (4, 5, 6), (4, 6, 7),  # +z
    (1, 0, 3), (1, 3, 2),  # -z
    (5, 1, 2), (5, 2, 6),  # +x
    (0, 4, 7), (0, 7, 3),  # -x
    (3, 7, 6), (3, 6, 2),  # +y
    (0, 1, 5), (0, 5, 4),  # -y
]

# Square pyramid, base on y=0, apex at y=1. No index buffer: vertex triples.
PYRAMID_VERTICES = [
    (-0.5, 0.0, 0.5), (0.5, 0.0, 0.5), (0.0, 1.0, 0.0),
    (0.5, 0.0, 0.5), (0.5, 0.0, -0.5), (0.0, 1.0, 0.0),
    (0.5, 0.0, -0.5), (-0.5, 0.0, -0.5), (0.0, 1.0, 0.0),
    (-0.5, 0.0, -0.5), (-0.5, 0.0, 0.5), (0.0, 1.0, 0.0),
]

def quad_mesh(size: float, materials=()) -> Mesh:
    """Square in the xz plane facing +y."""
    h = size / 2
    return Mesh([(-h, 0.0, -h), (h, 0.0, -h), (h, 0.0, h), (-h, 0.0, h)],
                [(0, 2, 1), (0, 3, 2)], materials)

def create_test_scene() -> SceneNode:
    """
    Fallback scene used when no model is given: a gray floor, a red cube,
    a blue pyramid and a tilted light panel behind them.
    """
    root = SceneNode("root")
    root.add_child(SceneNode("floor", mesh=quad_mesh(20.0, [Material(Color(0.7, 0.7, 0.7))])))

    objects = root.add_child(SceneNode("objects", Transform.translation(0.0, 0.0, -1.0)))
    objects.add_child(SceneNode(
        "cube",
        Transform.from_trs((-1.2, 0.5, 0.0), (0.0, 30.0, 0.0)),
        mesh=Mesh(CUBE_VERTICES, CUBE_INDICES, [Material(Color(0.9, 0.2, 0.2))]),
    ))
    objects.add_child(SceneNode(
        "pyramid",
        Transform.from_trs((1.2, 0.0, 0.0), scale=(1.2, 1.5, 1.2)),
        mesh=Mesh(PYRAMID_VERTICES),
        material_override=Material(Color(0.2, 0.4, 0.9)),
    ))
    objects.add_child(SceneNode(
        "panel",
        Transform.from_trs((0.0, 1.5, -2.5), (75.0, 0.0, 0.0)),
        # No material: resolves to white.
        mesh=quad_mesh(3.0),
    ))
    return root
