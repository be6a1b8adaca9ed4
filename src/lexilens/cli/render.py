"""
Rich rendering of lookup results.
"""

from rich.console import Console
from rich.markup import escape

from lexilens.core.cost import format_usage
from lexilens.core.result import LookupResult
from lexilens.core.validate import is_ascii_word

console = Console()


def print_result(word: str, result: LookupResult, remaining: int | None = None):
    console.print(f"\n[bold]📘 {escape(word.title())}[/bold]")
    if is_ascii_word(word):
        console.print("[dim]🔊 pronunciation available[/dim]")
    console.print()

    console.print(f"[bold]Definition:[/bold] {escape(result.definition)}")
    console.print(f"[bold]Synonyms:[/bold] {escape(', '.join(result.synonyms))}")
    console.print(f"[bold]Antonyms:[/bold] {escape(', '.join(result.antonyms))}")

    console.print("[bold]Examples:[/bold]")
    for example in result.examples:
        console.print(f"  • {escape(example)}")

    if result.fact:
        console.print(f"\n[italic]💡 {escape(result.fact)}[/italic]")

    console.print(f"\n[blue italic]{format_usage(result.usage)}[/blue italic]")
    if remaining is not None:
        console.print(f"[dim]{remaining} lookups left today[/dim]")
