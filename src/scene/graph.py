# scene/graph.py
from typing import Iterator, List, Optional, Sequence, Tuple
import numpy as np
from core.color import Color, WHITE
from core.transform import Transform
from core.vector import Vector3
from geometry.mesh import Traceable
from geometry.world import Scene

class Material:
    """Flat surface color."""
    def __init__(self, color: Color):
        self.color = color

    def __repr__(self) -> str:
        return f"Material({self.color!r})"

class Mesh:
    """
    Raw mesh data: an (N, 3) vertex array and an optional (M, 3) index array.
    ``materials`` lists the per-surface materials in surface order.
    """
    def __init__(self, vertices, indices=None, materials: Sequence[Material] = ()):
        self.vertices = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)
        self.indices = None if indices is None else np.asarray(indices, dtype=np.int64).reshape(-1, 3)
        self.materials = list(materials)

    def __repr__(self) -> str:
        faces = len(self.indices) if self.indices is not None else len(self.vertices) // 3
        return f"Mesh({len(self.vertices)} vertices, {faces} faces)"

class SceneNode:
    """A node in the host scene graph, with a transform relative to its parent."""
    def __init__(self, name: str = "", transform: Optional[Transform] = None,
                 mesh: Optional[Mesh] = None, material_override: Optional[Material] = None,
                 children: Sequence["SceneNode"] = ()):
        self.name = name
        self.transform = transform if transform is not None else Transform.identity()
        self.mesh = mesh
        self.material_override = material_override
        self.children: List[SceneNode] = list(children)

    def add_child(self, child: "SceneNode") -> "SceneNode":
        self.children.append(child)
        return child

    def __repr__(self) -> str:
        return f"SceneNode({self.name!r}, children={len(self.children)})"

def walk(root: SceneNode, parent: Optional[Transform] = None) -> Iterator[Tuple[SceneNode, Transform]]:
    """Depth-first traversal yielding each node with its world transform."""
    world = root.transform if parent is None else parent @ root.transform
    yield root, world
    for child in root.children:
        yield from walk(child, world)

def resolve_color(override: Optional[Material], materials: Sequence[Material]) -> Color:
    """Override material, else the first surface material, else opaque white."""
    if override is not None:
        return override.color
    if materials:
        return materials[0].color
    return WHITE

def triangles_from_mesh(mesh: Mesh) -> List[Tuple[Vector3, Vector3, Vector3]]:
    """
    Object-space triangles. Without an index buffer, consecutive vertex
    triples form the faces and any trailing vertices are ignored.
    """
    points = [Vector3(float(x), float(y), float(z)) for x, y, z in mesh.vertices]
    if mesh.indices is not None:
        return [(points[a], points[b], points[c]) for a, b, c in mesh.indices]
    usable = len(points) - len(points) % 3
    return [(points[i], points[i + 1], points[i + 2]) for i in range(0, usable, 3)]

def extract_renderables(root: SceneNode) -> List[Tuple[Transform, Color, list]]:
    """(world transform, flat color, object-space triangles) per mesh-bearing node."""
    renderables = []
    for node, world in walk(root):
        if node.mesh is None:
            continue
        color = resolve_color(node.material_override, node.mesh.materials)
        renderables.append((world, color, triangles_from_mesh(node.mesh)))
    return renderables

def build_scene(root: SceneNode) -> Scene:
    return Scene(Traceable(color, triangles, transform=world)
                 for world, color, triangles in extract_renderables(root))
