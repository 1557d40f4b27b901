SAMPLE_MARKDOWN = r"""# Live Markdown Streaming

This document is streamed **chunk by chunk** and re-rendered as it grows.

## Stack

- **Parser**: markdown-it-py with dollar math
- **Renderer**: a tree walker over hast-style nodes
- **Display**: rich live updates

### Code

```python
async for event in source.stream():
    if event.kind == EventKind.CONTENT:
        view.feed(event.content)
```

### Math

Einstein's mass-energy equivalence: $E = mc^2$

A Gaussian integral:

$$\int_{-\infty}^{\infty} e^{-x^2} dx = \sqrt{\pi}$$

Bracket formulas inside plain text are picked up too: \[ a^2 + b^2 = c^2 \]

### Features

1. Incremental re-rendering
2. Inline and display math
3. Highlighted code blocks

> Each render starts from scratch on the full buffer, so partial input is fine.

**Stream complete!**
"""
