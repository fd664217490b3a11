## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# dashopts — Compact short/long option declarations and a strict argument scanner.
#

import os
import sys
import json
from dataclasses import dataclass

import click

from .errors import DashOptsError, DeclarationSyntaxError, OptionReferenceError
from .parser import try_parse_declaration
from .runtime import OptionParser
from .formatting import write_without_ansi, format_result


@dataclass(frozen=True)
class CliConfig:
    verbose: int
    lenient: bool
    plain: bool
    as_json: bool


class CliRunner:
    def __init__(self, config: CliConfig):
        self.config = config
        self.failure = False

        if config.plain:
            writer = write_without_ansi(sys.stdout.write)
            sys.stdout.write, sys.stderr.write = writer, writer

    def _report(self, message: str, detail: str, exc: Exception) -> None:
        header = f"{detail} (Exception: \033[33m{type(exc).__name__}\033[0m)"
        print(f'\033[30;43m {message} \033[0m {header}\n\033[90m  {exc}\033[0m\n', file=sys.stderr)
        self.failure = True

    def handle_exception(self, exc: DashOptsError, context: str) -> None:
        if isinstance(exc, DeclarationSyntaxError):
            self._report("SYNTAX ERROR.", f"Declaration `\033[97m{exc.declaration}\033[0m` is malformed!", exc)
        elif isinstance(exc, OptionReferenceError):
            self._report("OPTION ERROR.", f"Processing {context} caused a problem!", exc)
        else:
            raise exc

    def build(self, declarations: tuple[str, ...]) -> OptionParser | None:
        parser = OptionParser(strict=not self.config.lenient, verbosity=self.config.verbose)
        for item in declarations:
            text, _, description = item.partition('::')
            try:
                parser.declare(text, description)
            except DashOptsError as exc:
                self.handle_exception(exc, f"declaration `\033[97m{text}\033[0m`")
                return None
        return parser

    def scan(self, parser: OptionParser, tokens: list[str]) -> None:
        try:
            parser.process(tokens)
        except OptionReferenceError as exc:
            self.handle_exception(exc, "the argument list")
            return

        if self.config.as_json:
            print(json.dumps({'hits': parser.last.hits(), 'values': parser.last.values(),
                              'positional': parser.last.positional}))
        else:
            print(format_result(parser.last, color=not self.config.plain))

    def check(self, declarations: tuple[str, ...]) -> None:
        for text in declarations:
            result = try_parse_declaration(text)
            if isinstance(result, DeclarationSyntaxError):
                self.handle_exception(result, text)
            else:
                print(str(result))

    def finalize(self) -> int:
        return 1 if self.failure else 0


@click.group(context_settings={'help_option_names': ['--help']})
@click.option('--verbose', '-v', default=0, count=True, help='Trace matched options (twice for every token).')
@click.option('--lenient', '-l', is_flag=True, help='Keep unknown option tokens as positionals instead of failing.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.option('--json', 'as_json', is_flag=True, help='Print scan results as JSON.')
@click.pass_context
def cli(ctx: click.Context, verbose: int, lenient: bool, plain: bool, as_json: bool) -> None:
    ctx.ensure_object(dict)
    ctx.obj['config'] = CliConfig(verbose=verbose, lenient=lenient, plain=plain, as_json=as_json)


@cli.command('scan')
@click.option('--declare', '-d', 'declarations', multiple=True, help='Option as `s/long[=placeholder][::description]`.')
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def scan_command(ctx: click.Context, declarations: tuple[str, ...], tokens: tuple[str, ...]) -> None:
    runner = CliRunner(ctx.obj['config'])
    if (parser := runner.build(declarations)) is not None:
        runner.scan(parser, list(tokens))
    ctx.exit(runner.finalize())


@cli.command('check')
@click.argument('declarations', nargs=-1)
@click.pass_context
def check_command(ctx: click.Context, declarations: tuple[str, ...]) -> None:
    runner = CliRunner(ctx.obj['config'])
    runner.check(declarations)
    ctx.exit(runner.finalize())


@cli.command('usage')
@click.option('--declare', '-d', 'declarations', multiple=True, help='Option as `s/long[=placeholder][::description]`.')
@click.pass_context
def usage_command(ctx: click.Context, declarations: tuple[str, ...]) -> None:
    runner = CliRunner(ctx.obj['config'])
    if (parser := runner.build(declarations)) is not None:
        print(parser.help(color=not ctx.obj['config'].plain))
    ctx.exit(runner.finalize())


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='dashopts')


if os.environ.get('DASHOPTS_DEBUG'): print('LOADED dashopts/__main__.py')

if __name__ == "__main__":
    main()
