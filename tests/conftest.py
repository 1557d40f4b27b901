import logging

import pytest
from rich.logging import RichHandler


@pytest.fixture
def isolated_rich_logging():
    """Run a test without RichHandlers on the root logger, then put them back."""
    root = logging.getLogger()
    saved = [h for h in root.handlers if isinstance(h, RichHandler)]
    level = root.level
    for h in saved:
        root.removeHandler(h)
    yield
    for h in list(root.handlers):
        if isinstance(h, RichHandler):
            root.removeHandler(h)
    for h in saved:
        root.addHandler(h)
    root.setLevel(level)
