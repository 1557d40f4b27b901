from rich.console import Console
from rich.theme import Theme

theme = Theme({
    "math.inline": "italic magenta",
    "math.block": "bold magenta",
    "error": "red bold",
    "progress": "dim",
    "banner": "dim",
})

console = Console(theme=theme)
