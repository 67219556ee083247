"""
CLI interface for Passforge password generator.
"""

import sys
import json
import logging
import threading
import time
import click
from typing import List, Optional

from .charsets import CATEGORY_BY_PATTERN_CHAR, CHAR_RANGES, INCLUDE_PATTERN_CHAR, WILDCARD_PATTERN_CHAR, CharCategory
from .derive import derive_options
from .exceptions import InvalidOptionsError
from .generators.password import PasswordGenerator
from .options import PRONOUNCEABLE, GenerationOptions
from .utils.protected import ProtectedValue
from .utils.validation import MAX_LENGTH, check_pattern

CLIPBOARD_CLEAR_SECONDS = 60


def copy_to_clipboard(value: str) -> bool:
    """
    Copy a password to the clipboard and clear it after a delay.

    Returns:
        True if the value was copied
    """
    try:
        import pyperclip
        pyperclip.copy(value)
    except ImportError:
        click.echo("pyperclip not installed. Install with: pip install pyperclip", err=True)
        return False
    except Exception as e:
        click.echo(f"Could not copy to clipboard: {e}", err=True)
        return False

    def clear_clipboard() -> None:
        time.sleep(CLIPBOARD_CLEAR_SECONDS)
        try:
            pyperclip.copy("")
        except Exception as e:
            # User may be doing other things, stay quiet on the terminal
            logging.getLogger(__name__).debug(f"Could not clear clipboard: {e}")

    clear_thread = threading.Thread(target=clear_clipboard, daemon=True)
    clear_thread.start()
    return True


def build_options(length: int, pattern: Optional[str], include: Optional[str],
                  categories: List[CharCategory], pronounceable: bool) -> GenerationOptions:
    """Build generation options from CLI arguments."""
    options = GenerationOptions(
        length=length,
        name=PRONOUNCEABLE if pronounceable else None,
        pattern=check_pattern(pattern, "Pattern"),
        include=check_pattern(include, "Include set"),
    )
    return options.with_categories(*categories)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Passforge - Generate passwords from categories and patterns."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


@cli.command()
@click.option("--length", "-l", default=16, type=click.IntRange(0, MAX_LENGTH),
              help=f"Password length (0-{MAX_LENGTH}, default: 16)")
@click.option("--pattern", "-p", help="Pattern mask, e.g. 'Aaaa-1111' (default: X)")
@click.option("--include", "-i", help="Extra characters to draw from")
@click.option("--upper/--no-upper", default=True, help="Uppercase letters (default: on)")
@click.option("--lower/--no-lower", default=True, help="Lowercase letters (default: on)")
@click.option("--digits/--no-digits", default=True, help="Digits (default: on)")
@click.option("--special/--no-special", default=False, help="Special characters")
@click.option("--brackets/--no-brackets", default=False, help="Brackets")
@click.option("--high/--no-high", default=False, help="High-range Latin-1 characters")
@click.option("--ambiguous/--no-ambiguous", default=False, help="Ambiguous characters (O, 0, o, I, l)")
@click.option("--pronounceable", is_flag=True, help="Generate a pronounceable password")
@click.option("--count", "-n", default=1, type=click.IntRange(1, 100), help="Number of passwords")
@click.option("--copy", "-c", is_flag=True, help="Copy the password to clipboard")
@click.option("--json", "as_json", is_flag=True, help="Print options and passwords as JSON")
def generate(length: int, pattern: Optional[str], include: Optional[str],
             upper: bool, lower: bool, digits: bool, special: bool, brackets: bool,
             high: bool, ambiguous: bool, pronounceable: bool, count: int,
             copy: bool, as_json: bool) -> None:
    """Generate one or more passwords."""
    if copy and count > 1:
        click.echo("Error: Cannot use --copy with --count greater than 1", err=True)
        sys.exit(1)

    enabled = {
        CharCategory.UPPER: upper,
        CharCategory.LOWER: lower,
        CharCategory.DIGITS: digits,
        CharCategory.SPECIAL: special,
        CharCategory.BRACKETS: brackets,
        CharCategory.HIGH: high,
        CharCategory.AMBIGUOUS: ambiguous,
    }

    try:
        options = build_options(
            length, pattern, include,
            [category for category, on in enabled.items() if on],
            pronounceable,
        )
        generator = PasswordGenerator(options)
        passwords = [generator.generate() for _ in range(count)]
    except InvalidOptionsError as e:
        click.echo(f"Error generating password: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps({"options": options.to_dict(), "passwords": passwords},
                              ensure_ascii=False, indent=2))
    elif copy:
        if copy_to_clipboard(passwords[0]):
            click.echo(f"🔐 Generated {length}-character password using: {generator.get_charset_info()}")
            click.echo("🔐 Generated password copied to clipboard.")
        else:
            click.echo(f"Generated password: {passwords[0]}")
    else:
        for password in passwords:
            click.echo(password)


def _read_password(password: Optional[str], stdin: bool) -> Optional[ProtectedValue]:
    """Get the password to analyze from the argument, stdin, or the live analyzer."""
    if stdin:
        return ProtectedValue.from_string(sys.stdin.read().rstrip("\r\n"))
    if password is not None:
        return ProtectedValue.from_string(password)

    from .analyzer.live import live_analyze

    accepted: Optional[ProtectedValue] = None

    def on_accept(value: ProtectedValue) -> None:
        nonlocal accepted
        accepted = value

    print()  # Add blank line before interface
    live_analyze(on_accept)
    print()  # Add blank line after interface
    return accepted


@cli.command()
@click.argument("password", required=False)
@click.option("--stdin", is_flag=True, help="Read password from stdin")
@click.option("--json", "as_json", is_flag=True, help="Print derived options as JSON")
@click.option("--generate", "-g", "regenerate", is_flag=True,
              help="Also generate a new password with the same composition")
def derive(password: Optional[str], stdin: bool, as_json: bool, regenerate: bool) -> None:
    """Derive generation options from an existing password."""
    if stdin and password is not None:
        click.echo("Error: Cannot use --stdin with a provided password", err=True)
        sys.exit(1)

    value = _read_password(password, stdin)
    if value is None:
        click.echo("No password entered.")
        sys.exit(0)

    options = derive_options(value)
    generated = PasswordGenerator(options).generate() if regenerate and options.categories else None

    if as_json:
        result = {"options": options.to_dict()}
        if generated is not None:
            result["password"] = generated
        click.echo(json.dumps(result, ensure_ascii=False, indent=2))
        return

    categories = [category.value for category in CharCategory if options.has(category)]
    click.echo(f"Length: {options.length}")
    click.echo(f"Categories: {', '.join(categories) if categories else 'none'}")

    if regenerate:
        if generated is None:
            click.echo("Error: No known character categories to generate from", err=True)
            sys.exit(1)
        click.echo(f"Generated: {generated}")


@cli.command()
def ranges() -> None:
    """List character categories and pattern mask characters."""
    pattern_chars = {category: char for char, category in CATEGORY_BY_PATTERN_CHAR.items()}

    click.echo("Categories:")
    for category, chars in CHAR_RANGES.items():
        click.echo(f"  {pattern_chars[category]}  {category.value:<10} {chars}")

    click.echo(f"  {INCLUDE_PATTERN_CHAR}  {'include':<10} characters given with --include")
    click.echo(f"  {WILDCARD_PATTERN_CHAR}  {'any':<10} any enabled category, each at least once")
    click.echo("Other pattern characters are copied literally.")


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
