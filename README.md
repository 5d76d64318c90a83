# voxelkit

Building blocks for a voxel game engine, with no dependency on any graphics
API. Vectors and matrices are NumPy arrays.

- `voxelkit.aabb.AABB`: axis-aligned bounding boxes. `test_point`,
  `is_colliding`, `test_plane` and a conservative `test_frustum` against a
  projection-view matrix; `translate` moves the box in place; `collide`
  returns the shortest push that moves another box out of this one, or
  `None`.
- `voxelkit.camera.Camera`: a yaw/pitch camera with `direction`, `right`,
  `up`, `move_toward`, `rotate` (pitch clamped short of vertical),
  `projection_matrix` and `view_matrix`. The helpers `perspective` and
  `look_at` build the matrices.
- `voxelkit.block.BlockData`: one block's model id, break amount and
  neighbour-visibility cache. Model id 0 is air; negative ids raise
  `ValueError`.
- `voxelkit.chunk.Chunk`: a 16×16×16 block store (`CHUNK_SIZE`).
  `set_block` raises `IndexError` out of range; `get_block` returns `None`
  for air or out-of-range coordinates. `serialize` gives three bytes per
  block (model high byte, model low byte, damage) and `deserialize` reads
  them back. `mark_cached`, `is_cached` and `invalidate_cache` track whether
  derived render data is up to date.
- `voxelkit.bmp.Bitmap`: `Bitmap.load` reads uncompressed 24-bit BMP files
  (raising `BitmapError` otherwise), with an optional RGB colour key that
  becomes transparent. Pixels are RGBA, addressed from the top-left:
  `get_pixel`, `set_pixel`, `blit`, `crop`, `save`, `raw_data` and
  `premultiplied`.
- `voxelkit.geometry`: vertex and UV tables for the unit cube (with faces
  chosen by a bitmask, ordered -x, +x, -y, +y, -z, +z), a full-screen plane
  and a skybox.
- `voxelkit.event.Event`: `subscribe` callbacks and `trigger` them with data.
- `voxelkit.ui.UIElement`: a rectangle showing a texture or a model id, with
  a pixel `intersect` test. `voxelkit.page_ui.PageUI` holds `Button`s and
  runs the callback of every button under a `click`.

## Install

```
pip install .
```

## Example

```python
from voxelkit.aabb import AABB

ground = AABB((0, 0, 0), (1, 1, 1))
player = AABB((0.2, 0.9, 0.2), (0.8, 1.9, 0.8))
push = ground.collide(player)   # about (0, 0.1, 0): push the player up
```

## Finding boxes in an image

`voxelkit-boxes` reads a 24-bit BMP and looks for rectangles of pure cyan
(0, 255, 255). It prints the image's width and height, then one line per
box:

```
voxelkit-boxes sprites.bmp
```

```
Width: 64
Height: 32
x: 2, y: 3, width: 9, height: 5
```

A box starts at a cyan pixel with no cyan pixel to its left or above it;
its reported width and height are the runs of cyan along its top row and
left column, each plus one. Coordinates count from the top-left corner.
Without a file name, or with a file that cannot be read, it prints an error
and exits with status 1.

From Python, `voxelkit.boxes.find_boxes(path, box_color)` returns the same
boxes as `Box` objects, for any RGB colour.

## What it does not do

voxelkit draws nothing: it opens no window, talks to no GPU and loads no
shaders, fonts or textures. There is no world made of many chunks, no
terrain generation, no saving of worlds, no player physics and no input
handling. `UIElement` and `PageUI` only store layout and handle clicks;
rendering them is left to the caller.