# scene/obj_loader.py
from typing import List, Optional
from scene.graph import Material, Mesh

def _vertex_index(token: str, vertex_count: int) -> int:
    # "v", "v/vt", "v//vn" or "v/vt/vn"; OBJ indices are 1-based, negatives are relative.
    index = int(token.split('/')[0])
    if index < 0:
        index = vertex_count + index
    else:
        index -= 1
    if not 0 <= index < vertex_count:
        raise ValueError(f"vertex index {token!r} out of range (have {vertex_count} vertices)")
    return index

def load_obj(filename: str, material: Optional[Material] = None) -> Mesh:
    """
    Load vertex positions and faces from a Wavefront OBJ file. Polygons are
    fan-triangulated; normals, texture coordinates and groups are ignored.
    """
    vertices: List[List[float]] = []
    indices: List[List[int]] = []

    print(f"Opening file: {filename}")
    with open(filename, 'r') as f:
        for line_num, line in enumerate(f, 1):
            values = line.split('#', 1)[0].split()
            if not values:
                continue
            try:
                if values[0] == 'v':
                    vertices.append([float(values[1]), float(values[2]), float(values[3])])
                elif values[0] == 'f':
                    if len(values) < 4:
                        raise ValueError("face needs at least three vertices")
                    face = [_vertex_index(v, len(vertices)) for v in values[1:]]
                    for i in range(1, len(face) - 1):
                        indices.append([face[0], face[i], face[i + 1]])
            except (ValueError, IndexError) as e:
                raise ValueError(f"{filename}:{line_num}: cannot parse {line.strip()!r}: {e}") from e

    print(f"Loaded {len(vertices)} vertices, {len(indices)} triangles")
    materials = [material] if material is not None else []
    return Mesh(vertices, indices, materials)
