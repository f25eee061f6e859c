# terraforge

Building blocks for procedural outdoor scenes: terrain meshes, height
functions, object placement and transforms. Everything works on plain numbers.

## Modules

- `terraforge.mesh`: `VertexData` holds a vertex's position, uv, normal and
  tangent. `load_obj(path)` reads a Wavefront OBJ file into a flat list of
  triangle vertices. It splits polygons into fans, flips the V texture
  coordinate (`1 - v`), and sets missing uvs or normals to zero.
  `index_vertices` merges identical vertices. `calculate_tangents` adds up the
  tangent of each triangle on its vertices and then normalises them.
  `Mesh(vertices, compute_tangents=True)` indexes the vertices and keeps them.
  `Mesh.from_arrays(positions, uvs=None, normals=None)` leaves the tangents at
  zero. `Mesh.from_file(path)` accepts only paths ending in `obj` and raises
  `ValueError` for anything else. A mesh also has `index_count()`,
  `vertex_count()` and `update_vertex_z(index, new_z)`.
- `terraforge.model`: `Model(mesh=None)` holds a mesh, plain `texture` and
  `material` attributes, a temporary `matrix` and a base matrix, as 4x4 numpy
  arrays. `model_matrix()` returns `matrix @ base_matrix`.
  `apply_transformation(t)` multiplies `t` onto the base matrix from the left.
- `terraforge.transform`: quaternion helpers on `(w, x, y, z)` tuples:
  `quat_multiply`, `quat_normalize`, `quat_rotate`, `angle_axis` and
  `euler_to_quat(pitch, yaw, roll)`. `Object(position, orientation, scale)`
  keeps its orientation normalised. It gives the `up()` (+Y), `forward()` (-Z)
  and `right()` (+X) vectors, and has `translate`, `rotate` (by a quaternion),
  `rotate_axis(angle, axis)` and `change_scale` (adds to the scale).
- `terraforge.uniforms`: the enums `Uniform`, `LayoutPosition` and
  `BindingPoint`, together with `uniform_name(target)` and
  `binding_point(target)`. `binding_point` takes a `Uniform` or a block name
  and raises `KeyError` when the target has no binding point.
- `terraforge.noise`: `smoothstep`, the abstract `NoiseFunction`, and two
  implementations:
  - `RandomNoise(seed, range_)` returns seeded random integers in
    `[0, range_]`.
  - `SmoothHill(seed, hill_center, hill_radius, hill_height)` returns a single
    round hill. Its height is stored as an integer.

  Each has `calculate_height(x, z, max_height)`, `calculate_radius(x, z,
  max_radius)` and `update_values(...)`.
- `terraforge.poisson`: `box_circle_collision` and `circle_circle_collision`.
  `PoissonDiscSampler(seed=21).generate_points(radius, region_start,
  region_size, samples_before_rejection=30)` returns points at least `radius`
  apart inside the region.
- `terraforge.variable_poisson`: `VariablePoissonDiscSampler(radius_noise,
  seed=21)` takes the radius of each point from
  `radius_noise.calculate_radius(x, z)`, scaled between `min_radius` and
  `max_radius`. It raises `ValueError` if `min_radius > max_radius`.
- `terraforge.terrain`: `bilinear_interpolation` and `recalculate_normals`.
  `TerrainChunk(height_fn, chunk_x, chunk_z, chunk_size, resolution)` builds a
  grid that grows towards +X and -Z. Its methods:
  - `generate()` fills the height map and builds `mesh`.
  - `height_at` reads the height stored at a grid point and raises `KeyError`
    for other points.
  - `update_height` replaces a stored height.
  - `recalculate_height()` samples `height_fn` again and moves the mesh
    vertices.
  - `approximate_height(pos)` interpolates between grid points. Grid points
    outside the chunk count as zero.
- `terraforge.chunks`: `ChunkManager(height_fn, grid_size_half=3,
  chunk_size=500, resolution=128)` generates every chunk from
  `-grid_size_half` to `grid_size_half` on both axes. It keeps them in
  `chunks`, keyed by `(x, z)`. `add_chunk(x, z)` adds one more.

Both samplers seed a fresh generator on every call, so the same arguments
always give the same points. The region's centre is only the starting spawn
point and is never part of the result.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from terraforge.noise import SmoothHill
from terraforge.terrain import TerrainChunk
from terraforge.poisson import PoissonDiscSampler

hill = SmoothHill(hill_center=(50.0, -50.0), hill_radius=50.0, hill_height=1)
chunk = TerrainChunk(hill.calculate_height, chunk_x=0.0, chunk_z=0.0,
                     chunk_size=100, resolution=16)
chunk.generate()
print(chunk.mesh.vertex_count(), chunk.mesh.index_count())
print(chunk.approximate_height((50.0, 0.0, -50.0)))

sampler = PoissonDiscSampler(seed=21)
points = sampler.generate_points(5.0, (0.0, 0.0), (100.0, 100.0), 30)
print(len(points))
```

## What it does not do

The package does not draw anything. It has no window, no GPU buffers and no
shader compilation. `terraforge.uniforms` only names uniforms, attribute slots
and binding points. It loads no textures or materials: `Model.texture`,
`Model.material` and `Object.model` are plain attributes. It reads only
geometry from OBJ files and ignores `.mtl` material libraries. There is no
command-line program.