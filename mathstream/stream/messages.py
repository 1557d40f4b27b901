from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class EventKind(Enum):
    CONNECTED = "connected"
    CONTENT = "content"
    DONE = "done"
    ERROR = "error"


@dataclass
class StreamEvent:
    kind: EventKind
    content: str = ""
    progress: Optional[int] = None
    message: str = ""
    raw: Optional[dict] = field(default=None, repr=False)
