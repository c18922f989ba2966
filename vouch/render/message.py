from __future__ import annotations
from typing import Any

from vouch.core.flags import FlagStore
from vouch.render.inspect import object_display

def get_message(flags: FlagStore, msg: str, actual: Any, expected: Any) -> str:
    """Render a failure template against the chain's flag state.

    Placeholders:
    - ``#{this}``: the current subject
    - ``#{act}``: the actual value
    - ``#{exp}``: the expected value

    A caller-supplied message (flag ``message``) is prefixed as ``"<message>: "``.
    """
    rendered = msg
    if "#{this}" in rendered:
        rendered = rendered.replace("#{this}", object_display(flags.get("object")))
    if "#{act}" in rendered:
        rendered = rendered.replace("#{act}", object_display(actual))
    if "#{exp}" in rendered:
        rendered = rendered.replace("#{exp}", object_display(expected))
    custom = flags.get("message")
    return f"{custom}: {rendered}" if custom else rendered
