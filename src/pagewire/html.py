"""Document shell for static pages."""

from __future__ import annotations


_DOCUMENT = """<!DOCTYPE html>
<html lang="en">
    <head>
        <meta charset="utf-8">
        <title>Hello!</title>
    </head>
    <body>
    {script}
    {body}
    </body>
</html>
"""


def script_tag(src: str) -> str:
    return f'<script src="{src}"></script>'


def compose(body_fragment: str, script_path: str | None = None) -> str:
    """Wrap ``body_fragment`` in the page shell.

    The script tag, when ``script_path`` is given, comes before the fragment.
    Neither value is escaped: callers must only pass trusted markup.
    """
    script = script_tag(script_path) if script_path is not None else ""
    return _DOCUMENT.format(script=script, body=body_fragment)
