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

import logging
import os
from typing import Optional

from .predicate_service import is_directory

logger = logging.getLogger(__name__)

MKDIR_MODE = 0o775


def mkdir(abs_path: Optional[str]) -> bool:
    """
    Create a single directory at an absolute path.

    An existing directory counts as success. Other failures return False
    without recording a diagnostic.
    """
    if abs_path is None:
        return False
    abs_path = os.fspath(abs_path)
    if abs_path == "":
        return False

    # TODO: check absoluteness on Windows too (drive letter or UNC prefix).
    if os.name != "nt" and not abs_path.startswith("/"):
        return False

    try:
        os.mkdir(abs_path, MKDIR_MODE)
    except FileExistsError:
        return is_directory(abs_path)
    except (OSError, ValueError) as e:
        logger.debug("mkdir failed for %s: %s", abs_path, e)
        return False
    return True
