# spatnear

Nearest-neighbour searches, close-pair detection and a few related
computations for spatial point patterns. It is plain Python and has no
third-party dependencies.

## Modules

- `spatnear.hasclose`
  - `has_close(x, y, r, z=None, box=None)` returns one boolean per point. A
    point is flagged when another point of the same pattern lies within
    distance `r`.
  - `has_close_cross(x1, y1, x2, y2, r, z1=None, z2=None, box=None)` flags
    each point of the first pattern that has a point of the second pattern
    within `r`.
  - Passing `z` (or `z1` and `z2` together) makes the points
    three-dimensional.
  - Passing `box` makes distances periodic, with the box side lengths as the
    periods.
- `spatnear.hotrod`
  - `hotrod_insulated(a, x, y, sigma, nterms)` evaluates the heat kernel on a
    rod of length `a` with insulated ends. It sums image terms for `k` from
    `-nterms` to `nterms`.
  - `hotrod_absorbing(a, x, y, sigma, nterms)` evaluates the kernel for a rod
    with absorbing ends, using a Fourier series of `nterms` terms.
  - Both return 0 when `a` or `sigma` is not positive.
  - When `sigma > 20 * a`, the insulated kernel returns `1/a` and the
    absorbing kernel returns 0.
- `spatnear.minnnd`
  - `min_nn_distance2(x, y, huge=inf, ignore_zero=False)` returns the
    *squared* minimum nearest-neighbour distance in a planar pattern.
  - With `ignore_zero=True`, coincident points are not counted.
- `spatnear.nearestpix`
  - `nearest_valid_pixel(x, y, mask, aspect=1.0, nsearch=None)` returns, for
    each query location in pixel units, the `(row, column)` of the nearest
    truthy pixel of `mask`.
  - The result is `None` when no valid pixel lies within `nsearch` pixels
    along each axis.
- `spatnear.metric`
  - `rect_distance(x, y, xx, yy, aspect)` is a metric whose unit ball is a
    rectangle of width 1 and height `aspect`.
  - `convex_distance(x, y, xx, yy, sx, sy)` is a metric whose unit ball is a
    symmetric convex polygon, given by the support directions `(sx[k], sy[k])`.
- `spatnear.loccum`
  - `local_sum(x, y, v, nr, rmax)` returns, for each point, the cumulative
    sum of the weights `v` of the *other* points within distance `t`. The
    sum is evaluated at `nr` equally spaced values of `t` from 0 to `rmax`.
  - `local_product(x, y, v, nr, rmax)` does the same with products.
  - Both raise `ValueError` if `nr < 2` or `rmax <= 0`.
- `spatnear.nndistance`
  - `nn_cross(x1, y1, x2, y2, id1=None, id2=None, huge=inf)` finds, for each
    point of the first pattern, the nearest point of the second pattern.
  - It returns a `NearestNeighbours` with the lists `distances` and `which`.
- `spatnear.knndistance`
  - `knn_cross(x1, y1, x2, y2, kmax=1, id1=None, id2=None, huge=inf)` finds
    the `kmax` nearest points of the second pattern for each point of the
    first.
  - It returns a `KNearestNeighbours` whose `distances` and `which` hold one
    list of `kmax` entries per point, in increasing order of distance.
- `spatnear.nngrid`
  - `nn_grid(nx, x0, xstep, ny, y0, ystep, xp, yp, huge=inf)` returns two
    `ny` by `nx` matrices, `(distances, which)`. They give the nearest data
    point for each grid point `(x0 + j*xstep, y0 + i*ystep)`, indexed
    `[i][j]`.
- `spatnear.knngrid`
  - `knn_grid(nx, x0, xstep, ny, y0, ystep, xp, yp, kmax=1, huge=inf)` is the
    same as `nn_grid`, but each matrix entry is a list of `kmax` values.
- `spatnear.nn3d`
  - `nn_3d(x, y, z, huge=inf)` finds the nearest other point within one 3D
    pattern.
  - `nn_cross_3d(x1, y1, z1, x2, y2, z2, id1=None, id2=None, huge=inf)`
    finds nearest neighbours from one 3D pattern to another.
  - `knn_3d(x, y, z, kmax=1, huge=inf)` finds the k nearest other points
    within one 3D pattern.
- `spatnear.nnmd`
  - `nn_md(points, huge=inf)` and `nn_cross_md(points1, points2, id1=None,
    id2=None, huge=inf)` do the same for points of any dimension. Each point
    is a sequence of coordinates.
- `spatnear.knnmd`
  - `knn_md(points, kmax=1, huge=inf)` and `knn_cross_md(points1, points2,
    kmax=1, id1=None, id2=None, huge=inf)` are the k-nearest versions of the
    functions in `spatnear.nnmd`.

### Identifiers

In the cross searches you may pass identifier sequences `id1` and `id2`.
They must be given together. Points that share an identifier are treated as
the same point and are never reported as neighbours of each other.

### The search bound

`huge` bounds the search. If nothing closer is found, the distance reported
is `huge` and the index is `None`. Unfilled places in k-nearest results are
filled the same way.

## Sorting requirements

The searches stop early by relying on sorted coordinates, so sort the input
first:

| Functions | Sort the points by |
|---|---|
| close-pair detection, `local_sum`, `local_product`, the grid searches | increasing x |
| `min_nn_distance2`, `nn_cross`, `knn_cross` | increasing y |
| the 3D searches | increasing z |
| the m-dimensional searches | increasing first coordinate |

Indices in the results are positions in the sorted input.

## Example

```python
from spatnear.nndistance import nn_cross

result = nn_cross([0.0, 1.0], [0.0, 1.0], [0.0, 2.0], [0.5, 1.5])
print(result.distances, result.which)
```

## What it does not do

- There is no nearest-neighbour search within a single *planar* pattern. Use
  `nn_md` or `knn_md` with two-coordinate points instead.
- There is no distance transform of pixel images. `spatnear.metric` only
  computes distances between two points.
- The local cumulative functions work from data point to data point only.
- There is no command-line interface.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```