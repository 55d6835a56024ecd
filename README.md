# odrkit

Pure-Python building blocks for OpenDRIVE road networks: reference-line
geometries, cubic splines, lanes with road marks, junction and road object
records, polygon triangulation and a simple triangle mesh with OBJ export.
There are no third-party dependencies.

## Modules

- `odrkit.vecmath` – vector and matrix helpers on plain tuples: `sign`, `add`,
  `sub`, `mut`, `eucl_distance`, `squared_norm`, `norm`, `normalize` (raises
  `ValueError` for a zero vector), `cross_product`, `mat_vec_multiplication`
  and `euler_angles_to_matrix`.
- `odrkit.utils` – lookups on mappings by their sorted keys
  (`get_nearest_lower_val`, `get_nearest_key`, `get_key_interval`),
  `golden_section_search`, Ramer–Douglas–Peucker simplification (`rdp`),
  `approximate_linear_quad_bezier`, `get_triangle_strip_outline_indices` and
  `next_towards_zero`.
- `odrkit.log` – `LogLevel` (`INFO`, `WARN`, `ERROR`), `log_level_to_string`,
  `set_log_callback` and `log_msg`. By default messages are printed to stdout
  as `[LEVEL] message`; passing `None` to `set_log_callback` restores that.
- `odrkit.mesh` – `Mesh3D` with `vertices`, `indices`, `normals` and
  `st_coordinates`, `add_mesh` for merging and `get_obj` for Wavefront OBJ text.
- `odrkit.bezier` – `CubicBezier` of any dimension with an arc-length lookup
  (`get`, `get_grad`, `get_t`, `get_length`, `get_subcurve`,
  `approximate_linear`, and the static `get_control_points` /
  `get_coefficients`).
- `odrkit.spline` – `Poly3` and the piecewise `CubicSpline` (`get`,
  `get_grad`, `get_max`, `get_poly`, `negate`, `add`, `approximate_linear`).
- `odrkit.geometry` – `GeometryType`, the abstract `RoadGeometry`, `Line` and
  `Arc`.
- `odrkit.spiral` – `fresnel`, `odr_spiral` and the clothoid `Spiral`.
- `odrkit.parampoly3` – `ParamPoly3`, a parametric cubic curve.
- `odrkit.earcut` – `earcut(points)`, ear-clipping triangulation of a simple
  polygon returning a flat list of vertex indices, three per triangle.
- `odrkit.roadmark` – `RoadMarksLine`, `RoadMarkGroup`, `RoadMark` and the
  width constants `ROADMARK_WEIGHT_STANDARD_WIDTH` and
  `ROADMARK_WEIGHT_BOLD_WIDTH`.
- `odrkit.lane` – `HeightOffset`, the hashable and ordered `LaneKey`, and
  `Lane` with `get_roadmarks(s_start, s_end)`, which resolves road mark groups
  and their dashed lines into single `RoadMark` stretches.
- `odrkit.lanesection` – `LaneSection` with `get_lanes`, `get_lane_id(s, t)`
  (on a lane boundary the inner lane wins), `get_lane` and `get_lane_at`.
- `odrkit.junction` – `ContactPoint`, `JunctionLaneLink`,
  `JunctionConnection`, `JunctionPriority`, `JunctionController` and
  `Junction`.
- `odrkit.objects` – `LaneValidityRecord`, `RoadObjectRepeat`,
  `RoadObjectCornerType`, `RoadObjectCorner`, `RoadObjectOutline`,
  `RoadObject` and `RoadSignal`.

## Installation

```
pip install .
```

## Example

```python
from odrkit.geometry import Line
from odrkit.spline import CubicSpline, Poly3
from odrkit.mesh import Mesh3D
from odrkit.earcut import earcut

line = Line(0.0, 0.0, 0.0, 0.0, 100.0)
print(line.get_xy(25.0))             # (25.0, 0.0)
print(line.approximate_linear(0.1))  # [0.0, 100.0]

width = CubicSpline()
width.s0_to_poly[0.0] = Poly3(0.0, 3.5, 0.0, 0.0, 0.0)
print(width.get(10.0))               # 3.5

square = [(0, 0), (1, 0), (1, 1), (0, 1)]
mesh = Mesh3D()
mesh.vertices = [(x, y, 0.0) for x, y in square]
mesh.indices = earcut(square)
print(mesh.get_obj())
```

## What the package does not do

odrkit does not read or write `.xodr` files. It has no road, reference-line
or road-network object that ties geometries, lane sections and elevation
together, no lane or road-mark mesh generation for whole roads, and no routing
graph. The records and geometries here are built and combined by the caller.

## Running the tests

```
pip install ".[test]"
pytest
```