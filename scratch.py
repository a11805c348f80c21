"""
Scratch Language Interpreter

This is the main entry point for the scratch language interpreter.

Workflow:
1. The source is read from the script named on the command line, or from `-e`.
2. Each non-blank line is tokenized by the Lexer.
3. The Parser turns the line's tokens into a single statement.
4. The Interpreter executes the statement against the run's shared scope.
5. The value of the last statement, if any, is printed.

Set SCRATCHDEBUG to a non-empty value to print the tokens and AST of every
line before it is executed.
"""
import os
import sys

from scratchlang.exceptions import ScratchError
from scratchlang.interpreter import Scope
from scratchlang.program import run_program


def print_usage():
    """
    Print usage.
    """
    print()
    print("Scratch Language Interpreter")
    print()
    print("Usage:")
    print("    scratch <script>")
    print("    scratch -e <source>")
    print()
    print("Arguments:")
    print("    <script>")
    print("        Path to a source file to execute. Every non-blank line holds")
    print("        one statement; the value of the last statement is printed.")
    print()
    print("Example:")
    print("    scratch -e 'let x = 3 * 2'")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -e, --eval <source>")
    print("        Run the given source text instead of a file.")
    print("    -h, --help")
    print("        Show this help message and exit.")


def debug_print_tokens_ast(line_num, tokens, ast):
    """
    Print tokenized source and AST
    """
    print(f"\nLine {line_num} tokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(ast)
    print(" ")


def debug_hook():
    """
    Return the per-line debug printer when SCRATCHDEBUG is set.
    """
    if os.environ.get('SCRATCHDEBUG'):
        return debug_print_tokens_ast
    return None


def format_value(value) -> str:
    """
    Render a runtime value for output.
    """
    return value if isinstance(value, str) else str(value)


def run_source(code: str, name: str) -> int:
    """
    Run source text and print its final value.
    """
    try:
        result = run_program(code, name, on_compile=debug_hook())
    except ScratchError as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    if result is not None:
        print(format_value(result))
    return 0


def run_script(script_name: str) -> int:
    """
    Run a scratch script
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    return run_source(code, script_name)


def run_repl():
    """
    Run the interactive REPL
    """
    print("Scratch Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    scope = Scope()
    while True:
        try:
            line = input(">>> ")
            if line.strip() in {"exit", "quit"}:
                break
            try:
                result = run_program(line, "<stdin>", scope, on_compile=debug_hook())
            except ScratchError as e:
                print(f"{type(e).__name__}: {e}")
                continue
            if result is not None:
                print(format_value(result))
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - ``-e``/``--eval`` followed by source text: run that text.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = (sys.argv if argv is None else argv)[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 2 and args[0] in ('-e', '--eval'):
        return run_source(args[1], "<eval>")
    if len(args) == 1 and not args[0].startswith('-'):
        return run_script(args[0])
    print_usage()
    return 2


if __name__ == "__main__":
    sys.exit(main(sys.argv))
