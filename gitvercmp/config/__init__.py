# Copyright 2025 Roger Cibrian
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

"""Alias configuration for gitvercmp.

Public API:

- load_alias_file: Load and resolve one YAML alias file
- build_alias_table: Seed table + alias files + GITVERCMP_ALIASES
"""

from .loader import ALIASES_ENV_VAR, build_alias_table, load_alias_file

__all__ = ["ALIASES_ENV_VAR", "build_alias_table", "load_alias_file"]
