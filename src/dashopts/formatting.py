## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import textwrap

from .types import Option, ScanResult


ANSI_RE = re.compile(r'\033\[[0-9;]*m')


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    return lambda text: write_fn(ANSI_RE.sub('', text))

def strip_ansi(text: str) -> str:
    return ANSI_RE.sub('', text)


def render_help(option: Option, color: bool = True, indent: int = 4) -> str:
    def c(code, text): return f"\033[{code}m{text}\033[0m" if color else text

    short = c('1;97', f"-{option.short}") if option.short else '  '
    sep = ', ' if option.short else '  '
    line = f"{short}{sep}{c('1;97', f'--{option.long}')}"
    if option.capture:
        line += ' ' + c('36', f"<{option.label}>")
    if option.description:
        line += '\n' + textwrap.indent(option.description, prefix=' ' * indent)
    return line

def format_help(options, color: bool = True) -> str:
    return '\n'.join(render_help(opt, color=color) for opt in options)


def format_result(result: ScanResult, color: bool = True) -> str:
    def c(code, text): return f"\033[{code}m{text}\033[0m" if color else text

    lines = []
    for name, match in result.matches.items():
        mark = c('32', '✔') if match.hit else c('90', '·')
        value = f" = {c('97', repr(match.value))}" if match.value else ''
        lines.append(f"  {mark} --{name}{value}")
    lines.append(f"  {c('90', 'positional')} {' '.join(result.positional) if result.positional else '∅'}")
    return '\n'.join(lines)
