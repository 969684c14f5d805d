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

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

import numpy as np

from .config import FFTDirection, FFTNormalization

if TYPE_CHECKING:
    import numpy.typing as npt

    from .config import FFTType


class FFTEngine(ABC):
    """This is the base class for the engines that compute the transforms
    dispatched by the ``tensorfft.fft`` entry points.

    The dispatcher resolves every argument before calling ``execute``: the
    input already has the dtype ``kind.input_dtype`` and holds exactly the
    number of points the transform consumes along ``axis`` (``n // 2 + 1``
    for C2R transforms, ``n`` otherwise). Engines must not write to the
    input and must be safe to call concurrently.
    """

    @abstractmethod
    def execute(
        self,
        a: npt.NDArray[Any],
        n: int,
        axis: int,
        kind: FFTType,
        direction: FFTDirection,
        norm: str,
    ) -> npt.NDArray[Any]:
        ...


class NumPyEngine(FFTEngine):
    """Runs the transforms eagerly with ``numpy.fft``."""

    def execute(
        self,
        a: npt.NDArray[Any],
        n: int,
        axis: int,
        kind: FFTType,
        direction: FFTDirection,
        norm: str,
    ) -> npt.NDArray[Any]:
        res: npt.NDArray[Any]
        # unnormalized transforms, scaled below
        if kind.is_real_to_complex:
            res = np.fft.rfft(a, n=n, axis=axis, norm="backward")
        elif kind.is_complex_to_real:
            res = np.fft.irfft(a, n=n, axis=axis, norm="forward")
        else:
            if direction == FFTDirection.FORWARD:
                res = np.fft.fft(a, n=n, axis=axis, norm="backward")
            else:
                res = np.fft.ifft(a, n=n, axis=axis, norm="forward")

        factor = FFTNormalization.from_string(norm).scale(n, direction)
        if factor != 1.0:
            res = res / factor

        if kind.is_single_precision:
            if res.dtype == np.complex128:
                return res.astype(np.complex64)
            elif res.dtype == np.float64:
                return res.astype(np.float32)
            elif res.dtype not in (np.complex64, np.float32):
                raise RuntimeError("Unsupported data type in eager FFT")
        return res.astype(kind.output_dtype, copy=False)
