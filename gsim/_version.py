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
from pathlib import PurePath

# Reads the version from the VERSION.txt at the root of the repository.
version_file_path = PurePath(__file__).parent.parent / "VERSION.txt"

with open(version_file_path, "r") as f:
    __version__ = f.read().strip()
