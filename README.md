# nctensor

Helpers for tensors held as numpy arrays in column-major (Fortran) order.
Indices count from 0 unless a function says otherwise.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `nctensor.index_block`: `IndexBlock` describes the selection on one
  dimension. Build one with `span(start, stop)` (inclusive), `single(index)`
  (drops the dimension) or `empty()` (the whole dimension).
  `IndexBlock.extent()` gives the number of indices in a span, and
  `IndexBlock.update(external_start, external_stride)` maps a block into an
  outer index space in place.
- `nctensor.subtensor_info`: `create_subtensor_info(blocks, input_sizes,
  output_ndim)` works out the sizes, strides and start/stop flat positions of
  a lower-dimensional view over the same memory and returns a frozen
  `SubTensorInfo`. `format_subtensor_info(info)` renders it as four
  tab-labelled lines. A `ValueError` is raised when `output_ndim` is below 1
  or the number of blocks does not match the number of input dimensions.
- `nctensor.creation`: `create_tensor(value, ndim, *dims)` fills a tensor
  with a scalar, or reshapes an array value in column-major order. The
  dimensions are given either as `ndim` numbers or as a single vector.
  `set_which(mask)` returns the 1-based positions of true entries in
  column-major order. `set_which0(flag)` returns `[1]` or an empty vector.
- `nctensor.flex`: assignment across different numbers of dimensions, where
  dimensions of size 1 may be dropped or added but the other dimensions must
  line up:
  - `assign_fixed_size(lhs, rhs)` writes into `lhs` in place.
  - `assign_whole_object(lhs_ndim, rhs)` returns a new array.
  - `assign_to_scalar(rhs, scalar_type)` and `scalar_cast(x, scalar_type)`
    produce scalars.
  - The checks `check_dims`, `check_dims_all_one` and `check_and_setup_dims`
    are public too.

  Mismatches raise `DimensionMismatchError`, a subclass of `ValueError`.
- `nctensor.indexing`:
  - `index_by_vec(x, dim, indices, r_indexing)` returns an `IndexByVecView`.
    It replaces one dimension with an index vector, which is 1-based when
    `r_indexing` is true. The view supports reads and writes through
    `view[i]` or `view[i, j, ...]`, and has `to_array()`, `assign(other)` and
    `process_index(index)`.
  - `index_by_scalar(x, dim, offset)` fixes one dimension.
  - `index_by_seqs(x, seqs)` slices by `(dim, start, end)` triples with
    inclusive ends.

  Both `index_by_scalar` and `index_by_seqs` return numpy views.
- `nctensor.decomps`: the containers `EigenDecomp` (`values`, `vectors`),
  `SVDDecomp` (`d`, `v`, `u`) and `DerivResult` (`value`, `gradient`,
  `hessian`). They all share the `FieldInterface` methods `field_names()`,
  `get_value(name)` and `set_value(name, value)`. Setting a field converts
  the value to that field's rank and scalar type. 1-D fields flatten any
  input.
- `nctensor.optim`:
  - `OptimResultList` holds `par`, `value`, `hessian`, `counts`,
    `convergence` and `message`.
  - `OptimControlList` holds optimiser settings. `init_to_defaults()` sets
    the standard defaults, for example `fnscale` 1, `reltol` the square root
    of machine epsilon, and `maxit` `None` for "unset".
  - `call_method("initToDefaults")` calls it by its exposed name.
  - The `REPORT` setting is exposed under that name and stored as `report`.

## Examples

```python
import numpy as np
from nctensor.index_block import span, single
from nctensor.subtensor_info import create_subtensor_info

info = create_subtensor_info([span(0, 1), single(2)], [3, 4], 1)
# SubTensorInfo(sizes=(12,), strides=(1,), start_indices=(6,), stop_indices=(8,))
```

```python
import numpy as np
from nctensor.indexing import index_by_vec

x = np.arange(12.0).reshape(3, 4, order="F")
view = index_by_vec(x, 1, [4, 2], r_indexing=True)
view.to_array()  # columns 3 and 1 of x
view[0, 0] = -1.0  # writes x[0, 3]
```

```python
from nctensor.optim import OptimControlList

control = OptimControlList()
control.call_method("initToDefaults")
control.get_value("REPORT")  # 10
```

## What it does not do

The package computes the layout of a strided sub-tensor view, but it has no
object that reads or writes through such a layout. It has no probability
density functions and no automatic differentiation. `DerivResult` and the
optimisation containers only hold values; nothing here runs an optimiser or
computes derivatives or decompositions.