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

"""
tensorfft
=========

Argument resolution and dtype/shape contract for the one-dimensional
discrete Fourier transforms ``fft``, ``ifft``, ``rfft``, ``irfft``, ``hfft``
and ``ihfft`` over one dimension of an N-dimensional array.

:meta private:
"""
from __future__ import annotations

from tensorfft import fft
from tensorfft.engine import FFTEngine, NumPyEngine
from tensorfft.runtime import runtime
from tensorfft.settings import settings

__version__ = "0.1.0"
