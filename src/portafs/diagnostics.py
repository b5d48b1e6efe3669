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

"""
Last-error side channel.

Operations that fail on a native call record a human readable message here
instead of raising. The message is per thread and stays set until the next
failure overwrites it or reset_error() clears it.
"""

import logging
import threading
from typing import Optional

logger = logging.getLogger(__name__)

_state = threading.local()


def set_error_msg(msg: str) -> None:
    msg = msg.rstrip("\n")
    previous: Optional[str] = getattr(_state, "message", None)
    if previous is not None and previous != msg:
        logger.debug("overwriting previous error message: %s", previous)
    _state.message = msg
    logger.warning("%s", msg)


def get_error_string() -> str:
    return getattr(_state, "message", None) or ""


def error_is_set() -> bool:
    return getattr(_state, "message", None) is not None


def reset_error() -> None:
    _state.message = None
