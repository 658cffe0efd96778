"""Text sinks for the generated document: files and the system clipboard.

Sink failures raise SinkError. They never touch the grid or the document,
so the caller can retry with another sink.

The clipboard is reached through whichever platform helper is on PATH:
pbcopy (macOS), clip (Windows), wl-copy (Wayland), xclip or xsel (X11).
"""

import os
import shutil
import subprocess

from pixelify.core.types import SinkError

# (executable, extra args) in preference order
_CLIPBOARD_COMMANDS = [
    ('pbcopy', []),
    ('clip', []),
    ('wl-copy', []),
    ('xclip', ['-selection', 'clipboard']),
    ('xsel', ['--clipboard', '--input']),
]


def write_file(text: str, path: str) -> str:
    """Write text to path (parent directories created). Returns the path."""
    try:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
    except OSError as e:
        raise SinkError('file', f'cannot write {path}: {e}') from e
    return path


def _clipboard_command() -> list[str] | None:
    for exe, extra in _CLIPBOARD_COMMANDS:
        found = shutil.which(exe)
        if found:
            return [found, *extra]
    return None


def copy_to_clipboard(text: str, timeout: float = 5.0) -> str:
    """Place text on the system clipboard. Returns the helper used."""
    cmd = _clipboard_command()
    if cmd is None:
        raise SinkError('clipboard', 'no clipboard helper found (pbcopy, clip, wl-copy, xclip, xsel)')
    try:
        subprocess.run(
            cmd,
            input=text.encode('utf-8'),
            capture_output=True,
            timeout=timeout,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        detail = e.stderr.decode('utf-8', 'replace').strip() if e.stderr else f'exit status {e.returncode}'
        raise SinkError('clipboard', f'{os.path.basename(cmd[0])} failed: {detail}') from e
    except (OSError, subprocess.TimeoutExpired) as e:
        raise SinkError('clipboard', f'{os.path.basename(cmd[0])} failed: {e}') from e
    return os.path.basename(cmd[0])
