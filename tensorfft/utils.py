# Copyright 2021-2022 NVIDIA Corporation
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
from __future__ import annotations

import operator
import sys
import traceback
from functools import wraps
from inspect import signature
from typing import Any, Callable, TypeVar

import numpy as np
from numpy.exceptions import AxisError
from typing_extensions import ParamSpec

R = TypeVar("R")
P = ParamSpec("P")

SUPPORTED_DTYPES = {
    np.dtype(np.float32),
    np.dtype(np.float64),
    np.dtype(np.complex64),
    np.dtype(np.complex128),
}


def add_boilerplate(
    *array_params: str,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Adds required boilerplate to the wrapped module-level function.

    Every time the wrapped function is called, this wrapper will convert all
    specified array-like parameters to NumPy ndarrays. No copy is made when
    the argument already is one, so the wrapped function must not write to
    it.
    """
    keys = set(array_params)
    assert len(keys) == len(array_params)

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        assert not hasattr(
            func, "__wrapped__"
        ), "this decorator must be the innermost"

        # For each parameter specified by name, also consider the case where
        # it's passed as a positional parameter.
        params = signature(func).parameters
        extra = keys - set(params)
        assert len(extra) == 0, f"unknown parameter(s): {extra}"
        indices = {idx for idx, param in enumerate(params) if param in keys}

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> R:
            args = tuple(
                np.asarray(arg) if idx in indices else arg
                for (idx, arg) in enumerate(args)
            )
            for k, v in kwargs.items():
                if k in keys:
                    kwargs[k] = np.asarray(v)

            return func(*args, **kwargs)

        return wrapper

    return decorator


def to_fft_dtype(dtype: Any) -> np.dtype[Any]:
    """Promote an input dtype to the floating type the transforms run in.

    Booleans, integers and floating types other than single and double
    precision are computed in double precision.
    """
    dtype = np.dtype(dtype)
    if dtype in SUPPORTED_DTYPES:
        return dtype
    if dtype.kind in "biuf":
        return np.dtype(np.float64)
    if dtype.kind == "c":
        return np.dtype(np.complex128)
    raise TypeError(f"tensorfft does not support dtype={dtype}")


def normalize_axis_index(axis: int, ndim: int, name: str = "dim") -> int:
    if isinstance(axis, (bool, np.bool_)):
        raise TypeError(f"{name} must be an integer, got {axis!r}")
    try:
        axis = operator.index(axis)
    except TypeError:
        raise TypeError(
            f"{name} must be an integer, got {type(axis).__name__}"
        ) from None
    if ndim == 0:
        raise AxisError(
            f"{name}={axis} is invalid for a 0-dimensional array, "
            "transforms need at least one dimension"
        )
    if not -ndim <= axis < ndim:
        raise AxisError(
            f"{name}={axis} is out of range for an array of rank {ndim} "
            f"(expected to be in range [{-ndim}, {ndim - 1}])"
        )
    return axis + ndim if axis < 0 else axis


def find_last_user_stacklevel() -> int:
    stacklevel = 1
    for frame, _ in traceback.walk_stack(sys._getframe().f_back):
        if not frame.f_globals["__name__"].startswith("tensorfft"):
            break
        stacklevel += 1
    return stacklevel
