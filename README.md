# protocore

Small, dependency-free building blocks for prototyping graphics and tooling
code in Python.

## Modules

- `protocore.vectors`: immutable 2-, 3- and 4-component vectors of one scalar
  kind (`ScalarKind`: float, double, int, uint, bool), built with `vec`,
  `dvec`, `ivec`, `uvec` and `bvec`. Single floats are rounded to 32-bit
  precision and integers wrap at 32 bits. Vectors support element-wise
  `+ - * /` and negation, bitwise `& | ^ << >> ~` for the integer kinds,
  comparisons that return bool vectors (`eq`, `ne`, `gt`, `ge`, `lt`, `le`),
  `logical_and`, `logical_or` and `logical_not` for bool vectors, swizzles
  `xy()` and `xyz()`, and `convert(kind)`.
- `protocore.vecfuncs`: `vsum`, `product`, `mincomp`, `maxcomp`, `sq`, `vabs`,
  `vmin`, `vmax`, `clamp`, `sign`, `fract`, `lerp`, `dot`, `lengthsq`,
  `length`, `normalize`, `all_true` and `any_true`.
- `protocore.coords`: 2D rotation helpers (`rotate`, `rotation`, `normalize2`,
  `rotation2d`, `rotate2d`, `perp`), the integer hash `wang_hash` and
  `wang_hash_float`, `cubic_pulse`, `round_vec`, `normalize_or_zero`,
  `normalize_or`, and conversions between pixel indices, pixel centres, UVs
  and centred coordinates (`st_from_id`, `id_from_st`, `uv_from_st`,
  `xy_from_uv`, `uvw_from_id` and the rest).
- `protocore.pose`: the `Pose` 2D similarity transform (translation plus a
  scaled rotation) with `*` for composition and point transforms, `~` for the
  inverse, and `identity`, `inverse`, `normalize`, `rotation`, `scaling`,
  `trans` and `scale_of`.
- `protocore.mat4`: the column-major `Mat4` with `*`, `Mat4.from_cols`,
  `Mat4.from_pose` (position, scale and quaternion), `inverse`, `xfm_vec` and
  `perspective_projection` (right-handed, reverse-z, infinite far plane).
- `protocore.crc`: `crc32` (reflected, polynomial 0xEDB88320) and `crc8`
  (polynomial 0x25), both continuing from a given starting value.
- `protocore.timer`: `time_counter`, `time_frequency`, `time_to_sec`,
  `time_to_msec`, `set_start`, `sec_since_start`, the `BlockTimer` context
  manager that logs how long its block took, and `TimerTree` for nested,
  pausable timers that yield `TimerResult` records.
- `protocore.emit`: build a tree of C-like syntax `Node`s (`iden`, `decl`,
  `assign`, `function_def`, `struct_def`, `constructor_def`, `binary`,
  `unary`, `include_header` and more) and render it with `emit` or
  `emit_code`.
- `protocore.files`: `scan_directories`, `scan_files` and `scan_paths` list a
  directory's subdirectories or the files with a given suffix; `file_stat`
  returns a `FileStats` with the modification time.
- `protocore.log`: `log`, `print_line`, `print_log` (which also appends to a
  file opened with `log_init` and closed with `log_term`), and `ensure`, which
  raises `HaltError` when its condition is false.

## Install

```
pip install .
```

## Examples

```python
from protocore.vectors import vec
from protocore.vecfuncs import dot, normalize

a = vec(1.0, 2.0, 3.0)
b = vec(4.0, 5.0, 6.0)
print(dot(a, b))          # 32.0
print(normalize(a))
```

```python
from protocore.crc import crc32

print(hex(crc32(0, b"123456789")))   # 0xcbf43926
```

```python
from protocore.emit import block, emit_code, function_def, iden, node_list, ret

fn = function_def(iden("int"), iden("answer"), node_list(), block(ret(iden("value"))), 0)
print(emit_code(fn))
# int answer() {
# 	return value;
# }
```

```python
from protocore.timer import TimerTree

tree = TimerTree()
tree.start("frame")
tree.start("update")
tree.stop()
tree.stop()
for result in tree.results():
    print(result.name, result.depth, result.time)
```

## What it does not include

There is no random number generator in the package; use Python's `random`
module. The package is a library only and installs no command.

## Running the tests

```
pip install .[test]
pytest
```