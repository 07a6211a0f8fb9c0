"""Layout of a strided view over a column-major tensor.

Each output dimension gets a size (an outer stride), an inner stride, and
start/stop flat positions. Element ``(i, j, k)`` of the view lives at flat
index ``start[0] + i*stride[0] + size[0]*((j*stride[1] + start[1]) +
size[1]*(k*stride[2] + start[2]))``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .index_block import IndexBlock

__all__ = ["SubTensorInfo", "create_subtensor_info", "format_subtensor_info"]


@dataclass(frozen=True)
class SubTensorInfo:
    """Sizes, strides and start/stop indices for each output dimension."""

    sizes: tuple[int, ...]
    strides: tuple[int, ...]
    start_indices: tuple[int, ...]
    stop_indices: tuple[int, ...]


def create_subtensor_info(
    blocks: Sequence[IndexBlock],
    input_sizes: Sequence[int],
    output_ndim: int,
) -> SubTensorInfo:
    """Work out the view layout selected by ``blocks`` on a tensor of ``input_sizes``."""
    if output_ndim < 1:
        raise ValueError("output_ndim must be at least 1; a 0-dimensional view is a scalar")
    if len(blocks) != len(input_sizes):
        raise ValueError(
            f"got {len(blocks)} index blocks for {len(input_sizes)} input dimensions"
        )

    sizes = [0] * output_ndim
    strides = [0] * output_ndim
    starts = [0] * output_ndim
    stops = [0] * output_ndim

    current_dim = output_ndim - 1
    dim_size = 1
    dim_start = 0
    dim_stride = 1
    on_leading_singletons = False
    extent = 0

    for i in reversed(range(len(input_sizes))):
        block = blocks[i]
        n = input_sizes[i]
        dim_size *= n
        dim_start = dim_start * n + block.start
        if block.is_single:
            if on_leading_singletons:
                dim_stride *= n
            continue
        extent = n if block.is_empty else block.extent()
        if current_dim > 0 or i == 0:
            if current_dim >= 0:
                sizes[current_dim] = dim_size
                starts[current_dim] = dim_start
                stops[current_dim] = dim_start + extent
                strides[current_dim] = dim_stride
                current_dim -= 1
                dim_size = 1
                dim_start = 0
                dim_stride = 1
        else:
            on_leading_singletons = True

    if on_leading_singletons:
        sizes[0] = dim_size
        starts[0] = dim_start
        stops[0] = dim_start + extent * dim_stride
        strides[0] = dim_stride

    return SubTensorInfo(tuple(sizes), tuple(strides), tuple(starts), tuple(stops))


def format_subtensor_info(info: SubTensorInfo) -> str:
    """Render the layout as four tab-labelled lines."""
    rows = (
        ("sizes", info.sizes),
        ("starts", info.start_indices),
        ("stops", info.stop_indices),
        ("strides", info.strides),
    )
    return "".join(
        f"{label}\t" + "".join(f"{value} " for value in values) + "\n"
        for label, values in rows
    )