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

from dataclasses import dataclass
from enum import IntEnum, unique
from typing import TYPE_CHECKING, Union

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class FFTType:
    def __init__(
        self,
        name: str,
        input_dtype: npt.DTypeLike,
        output_dtype: npt.DTypeLike,
        single_precision: bool,
    ) -> None:
        self._name = name
        self._input_dtype = np.dtype(input_dtype)
        self._output_dtype = np.dtype(output_dtype)
        self._single_precision = single_precision

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return str(self)

    @property
    def input_dtype(self) -> np.dtype[np.generic]:
        return self._input_dtype

    @property
    def output_dtype(self) -> np.dtype[np.generic]:
        return self._output_dtype

    @property
    def is_single_precision(self) -> bool:
        return self._single_precision

    @property
    def is_real_to_complex(self) -> bool:
        return self._input_dtype.kind == "f"

    @property
    def is_complex_to_real(self) -> bool:
        return self._output_dtype.kind == "f"


FFT_C2C = FFTType(
    "C2C",
    np.complex64,
    np.complex64,
    True,
)

FFT_Z2Z = FFTType(
    "Z2Z",
    np.complex128,
    np.complex128,
    False,
)

FFT_R2C = FFTType(
    "R2C",
    np.float32,
    np.complex64,
    True,
)

FFT_C2R = FFTType(
    "C2R",
    np.complex64,
    np.float32,
    True,
)

FFT_D2Z = FFTType(
    "D2Z",
    np.float64,
    np.complex128,
    False,
)

FFT_Z2D = FFTType(
    "Z2D",
    np.complex128,
    np.float64,
    False,
)


class FFTCode:
    @staticmethod
    def complex_code(dtype: npt.DTypeLike) -> FFTType:
        if dtype == np.complex128:
            return FFT_Z2Z
        elif dtype == np.complex64:
            return FFT_C2C
        else:
            raise TypeError(
                (
                    "Data type for FFT not supported "
                    "(supported types are complex64 and complex128)"
                )
            )

    @staticmethod
    def real_to_complex_code(dtype: npt.DTypeLike) -> FFTType:
        if dtype == np.float64:
            return FFT_D2Z
        elif dtype == np.float32:
            return FFT_R2C
        else:
            raise TypeError(
                (
                    "Data type for FFT not supported "
                    "(supported types are float32 and float64)"
                )
            )

    @staticmethod
    def complex_to_real_code(dtype: npt.DTypeLike) -> FFTType:
        if dtype == np.complex128:
            return FFT_Z2D
        elif dtype == np.complex64:
            return FFT_C2R
        else:
            raise TypeError(
                (
                    "Data type for FFT not supported "
                    "(supported types are complex64 and complex128)"
                )
            )


@unique
class FFTDirection(IntEnum):
    FORWARD = 1
    INVERSE = 2


@unique
class FFTDomain(IntEnum):
    REAL = 1
    COMPLEX = 2


NORM_MODES = ("backward", "ortho", "forward")


@unique
class FFTNormalization(IntEnum):
    FORWARD = 1
    INVERSE = 2
    ORTHOGONAL = 3

    @staticmethod
    def from_string(in_string: Union[str, None]) -> FFTNormalization:
        if in_string == "forward":
            return FFTNormalization.FORWARD
        elif in_string == "ortho":
            return FFTNormalization.ORTHOGONAL
        elif in_string == "backward" or in_string is None:
            return FFTNormalization.INVERSE
        else:
            raise ValueError(
                f"Invalid normalization mode {in_string!r} "
                f"(valid modes are {', '.join(map(repr, NORM_MODES))})"
            )

    @staticmethod
    def reverse(in_string: Union[str, None]) -> str:
        if in_string == "forward":
            return "backward"
        elif in_string == "backward" or in_string is None:
            return "forward"
        else:
            return in_string

    def scale(self, n: int, direction: FFTDirection) -> float:
        """Factor the unnormalized transform of length ``n`` is divided by."""
        if self == FFTNormalization.ORTHOGONAL:
            return float(np.sqrt(n))
        if (self == FFTNormalization.FORWARD) == (
            direction == FFTDirection.FORWARD
        ):
            return float(n)
        return 1.0


@dataclass(frozen=True)
class FFTVariant:
    """One of the six one-dimensional transforms.

    ``domain`` is the element kind the variant consumes, ``onesided_input``
    and ``onesided_output`` say which side carries a Hermitian half spectrum
    of ``n // 2 + 1`` points. ``conjugate`` marks the Hermitian variants,
    which run on the engine as the opposite real transform with conjugation
    and reversed normalization.
    """

    name: str
    direction: FFTDirection
    domain: FFTDomain
    onesided_input: bool
    onesided_output: bool
    conjugate: bool = False

    def __str__(self) -> str:
        return self.name

    @property
    def engine_direction(self) -> FFTDirection:
        if not self.conjugate:
            return self.direction
        if self.direction == FFTDirection.FORWARD:
            return FFTDirection.INVERSE
        return FFTDirection.FORWARD

    def input_length(self, n: int) -> int:
        return n // 2 + 1 if self.onesided_input else n

    def output_length(self, n: int) -> int:
        return n // 2 + 1 if self.onesided_output else n

    def default_n(self, extent: int) -> int:
        # the even length is assumed when reconstructing a full signal
        return 2 * (extent - 1) if self.onesided_input else extent

    def fft_type(self, dtype: npt.DTypeLike) -> FFTType:
        if self.onesided_input:
            return FFTCode.complex_to_real_code(dtype)
        if self.onesided_output:
            return FFTCode.real_to_complex_code(dtype)
        return FFTCode.complex_code(dtype)


FFT = FFTVariant(
    "fft", FFTDirection.FORWARD, FFTDomain.COMPLEX, False, False
)
IFFT = FFTVariant(
    "ifft", FFTDirection.INVERSE, FFTDomain.COMPLEX, False, False
)
RFFT = FFTVariant("rfft", FFTDirection.FORWARD, FFTDomain.REAL, False, True)
IRFFT = FFTVariant(
    "irfft", FFTDirection.INVERSE, FFTDomain.COMPLEX, True, False
)
HFFT = FFTVariant(
    "hfft", FFTDirection.FORWARD, FFTDomain.COMPLEX, True, False, True
)
IHFFT = FFTVariant(
    "ihfft", FFTDirection.INVERSE, FFTDomain.REAL, False, True, True
)
