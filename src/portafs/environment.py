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

import os
from typing import Optional


def get_env(name: str) -> str:
    """Value of environment variable `name`, or "" when it is unset."""
    if name is None:
        raise ValueError("environment variable name is None")
    return os.environ.get(name, "")


def get_home_dir() -> Optional[str]:
    """Home directory of the current user, or None when it cannot be resolved."""
    home = get_env("USERPROFILE" if os.name == "nt" else "HOME")
    if not home:
        return None
    return home
