# Copyright 2024 GSim Development Team
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Base exceptions raised by gsim."""


class GSimError(Exception):
    """Any error raised by gsim."""

    pass


class GSimValueError(ValueError, GSimError):
    """A ValueError raised by gsim.

    Errors signaling that a caller broke the contract of an operation with
    the values it provided (rather than their types) derive from this class,
    so that they remain catchable as ValueError.
    """

    pass
