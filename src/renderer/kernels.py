# renderer/kernels.py
#
# Compiled CPU path: the scene is flattened into numpy arrays and each image
# row is shaded independently under prange. Arithmetic mirrors the pure
# Python classes operation for operation so both backends agree.
import math
from collections import namedtuple
import numpy as np
from numba import njit, prange
from geometry.mesh import EPSILON
from geometry.world import Scene

SceneArrays = namedtuple("SceneArrays", ["vertices", "normals", "ranges", "colors"])

def flatten_scene(scene: Scene) -> SceneArrays:
    """
    Packs every triangle into an (N, 9) vertex array and (N, 3) normal array.
    Object i owns triangles ranges[i, 0] .. ranges[i, 1] - 1.
    """
    triangle_count = scene.triangle_count
    vertices = np.zeros((triangle_count, 9), dtype=np.float64)
    normals = np.zeros((triangle_count, 3), dtype=np.float64)
    ranges = np.zeros((len(scene.objects), 2), dtype=np.int64)
    colors = np.zeros((len(scene.objects), 3), dtype=np.float64)

    triangle_idx = 0
    for obj_idx, obj in enumerate(scene.objects):
        ranges[obj_idx, 0] = triangle_idx
        colors[obj_idx] = (obj.color.r, obj.color.g, obj.color.b)
        for triangle in obj.triangles:
            vertices[triangle_idx, 0:3] = (triangle.v0.x, triangle.v0.y, triangle.v0.z)
            vertices[triangle_idx, 3:6] = (triangle.v1.x, triangle.v1.y, triangle.v1.z)
            vertices[triangle_idx, 6:9] = (triangle.v2.x, triangle.v2.y, triangle.v2.z)
            normals[triangle_idx] = (triangle.normal.x, triangle.normal.y, triangle.normal.z)
            triangle_idx += 1
        ranges[obj_idx, 1] = triangle_idx
    return SceneArrays(vertices, normals, ranges, colors)

@njit
def ray_triangle_intersect(ox, oy, oz, dx, dy, dz, tri):
    """Möller–Trumbore on a packed triangle. Returns t, or -1.0 on a miss."""
    e1x = tri[3] - tri[0]
    e1y = tri[4] - tri[1]
    e1z = tri[5] - tri[2]
    e2x = tri[6] - tri[0]
    e2y = tri[7] - tri[1]
    e2z = tri[8] - tri[2]

    hx = dy * e2z - dz * e2y
    hy = dz * e2x - dx * e2z
    hz = dx * e2y - dy * e2x
    a = e1x * hx + e1y * hy + e1z * hz
    if abs(a) < EPSILON:
        return -1.0

    f = 1.0 / a
    sx = ox - tri[0]
    sy = oy - tri[1]
    sz = oz - tri[2]
    u = f * (sx * hx + sy * hy + sz * hz)
    if u < 0.0 or u > 1.0:
        return -1.0

    qx = sy * e1z - sz * e1y
    qy = sz * e1x - sx * e1z
    qz = sx * e1y - sy * e1x
    v = f * (dx * qx + dy * qy + dz * qz)
    if v < 0.0 or u + v > 1.0:
        return -1.0

    t = f * (e2x * qx + e2y * qy + e2z * qz)
    if t <= EPSILON:
        return -1.0
    return t

@njit
def scene_closest_hit(ox, oy, oz, dx, dy, dz, vertices, ranges):
    """Returns (t, triangle index, object index); indices are -1 on a miss."""
    best_t = -1.0
    best_tri = -1
    best_obj = -1
    for obj in range(ranges.shape[0]):
        obj_t = -1.0
        obj_tri = -1
        for i in range(ranges[obj, 0], ranges[obj, 1]):
            t = ray_triangle_intersect(ox, oy, oz, dx, dy, dz, vertices[i])
            if t > 0.0 and (obj_t < 0.0 or t < obj_t):
                obj_t = t
                obj_tri = i
        if obj_tri >= 0 and (best_tri < 0 or obj_t < best_t):
            best_t = obj_t
            best_tri = obj_tri
            best_obj = obj
    return best_t, best_tri, best_obj

@njit
def scene_first_hit(ox, oy, oz, dx, dy, dz, vertices, ranges):
    """Index of the first object in scene order hit by the ray, or -1."""
    for obj in range(ranges.shape[0]):
        for i in range(ranges[obj, 0], ranges[obj, 1]):
            if ray_triangle_intersect(ox, oy, oz, dx, dy, dz, vertices[i]) > 0.0:
                return obj
    return -1

@njit
def clamp01(value):
    return min(1.0, max(0.0, value))

@njit(parallel=True)
def render_kernel(width, height, origin, forward, right, up, half_width, half_height,
                  vertices, normals, ranges, colors, light, ambient, shading, out):
    """
    Fills out[x, y, :] for every pixel.

    shading holds (reflection bias, reflected albedo, base weight, reflection weight).
    """
    bias = shading[0]
    albedo = shading[1]
    base_weight = shading[2]
    reflection_weight = shading[3]
    ox = origin[0]
    oy = origin[1]
    oz = origin[2]

    for y in prange(height):
        ny = 1 - ((y + 0.5) / height) * 2
        for x in range(width):
            nx = ((x + 0.5) / width) * 2 - 1
            sx = nx * half_width
            sy = ny * half_height
            dx = forward[0] + right[0] * sx + up[0] * sy
            dy = forward[1] + right[1] * sx + up[1] * sy
            dz = forward[2] + right[2] * sx + up[2] * sy
            length = math.sqrt(dx * dx + dy * dy + dz * dz)
            if length != 0.0:
                dx = dx / length
                dy = dy / length
                dz = dz / length

            t, tri, obj = scene_closest_hit(ox, oy, oz, dx, dy, dz, vertices, ranges)
            if tri < 0:
                for c in range(3):
                    out[x, y, c] = clamp01(ambient[c])
                continue

            px = ox + dx * t
            py = oy + dy * t
            pz = oz + dz * t
            nnx = normals[tri, 0]
            nny = normals[tri, 1]
            nnz = normals[tri, 2]

            diffuse = max(0.0, -(light[0] * nnx + light[1] * nny + light[2] * nnz))

            d_dot_n = dx * nnx + dy * nny + dz * nnz
            rdx = dx - nnx * 2 * d_dot_n
            rdy = dy - nny * 2 * d_dot_n
            rdz = dz - nnz * 2 * d_dot_n
            rox = px + nnx * bias
            roy = py + nny * bias
            roz = pz + nnz * bias
            reflected_obj = scene_first_hit(rox, roy, roz, rdx, rdy, rdz, vertices, ranges)

            for c in range(3):
                base = colors[obj, c] * (ambient[c] + 1.0 * diffuse)
                reflected = 0.0
                if reflected_obj >= 0:
                    reflected = colors[reflected_obj, c] * albedo
                out[x, y, c] = clamp01(base * base_weight + reflected * reflection_weight)
