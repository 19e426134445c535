"""
Terminal Front End with Rich

Loading, interactive scoring and batch scoring with terminal output
rendered through the Rich library.
"""

from pathlib import Path
from typing import Dict, List, Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

from .interpolation import InterpolationWeights
from .model import BigramPerplexityModel, perplexity_from_log_prob
from .tables import PathLike


console = Console()

PROMPT = "Enter a sentence:"
QUIT_WORDS = ('quit', 'exit', 'q')


def create_stats_table(stats: Dict) -> Table:
    """Create a Rich table displaying model statistics."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("Metric", style="green")
    table.add_column("Value", style="yellow", justify="right")

    for key, value in stats.items():
        display_key = key.replace('_', ' ').title()

        if isinstance(value, int):
            display_value = f"{value:,}"
        else:
            display_value = f"{value:g}"

        table.add_row(display_key, display_value)

    return table


def load_model_cli(unigrams_path: PathLike, bigrams_path: PathLike,
                   weights: Optional[InterpolationWeights] = None,
                   console: Console = console) -> BigramPerplexityModel:
    """
    Load a model while showing a spinner, then print its statistics.

    Args:
        unigrams_path: Unigram table file
        bigrams_path: Bigram table file
        weights: Interpolation weights
        console: Console to render to

    Returns:
        Loaded BigramPerplexityModel

    Raises:
        TableLoadError: If either table fails to load
    """
    with console.status(f"[cyan]Loading tables {unigrams_path} and {bigrams_path}..."):
        model = BigramPerplexityModel.from_files(unigrams_path, bigrams_path, weights)

    console.print(f"[green]✓[/green] Model loaded from: [bold]{unigrams_path}[/bold] "
                  f"and [bold]{bigrams_path}[/bold]")
    console.print(Panel(
        create_stats_table(model.stats()),
        title="[bold]Model[/bold]",
        border_style="yellow"
    ))
    return model


def interactive_shell(model: BigramPerplexityModel, console: Console = console,
                      stream: Optional[TextIO] = None) -> None:
    """
    Read sentences one line at a time and print their perplexity.

    Stops at end of input, on Ctrl-C or when a quit word is entered.

    Args:
        model: Loaded model
        console: Console to render to
        stream: Line source; standard input when None
    """
    while True:
        try:
            line = console.input(f"[bold cyan]{PROMPT}[/bold cyan]\n", stream=stream)
        except (EOFError, KeyboardInterrupt):
            break

        # readline() returns '' only at end of stream
        if stream is not None and not line:
            break

        sentence = line.strip()
        if sentence.lower() in QUIT_WORDS:
            break

        console.print(f"perplexity: {model.compute_sentence(sentence)}\n", highlight=False)


def score_file_cli(model: BigramPerplexityModel, path: PathLike,
                   console: Console = console,
                   max_workers: Optional[int] = None) -> List[float]:
    """
    Score every line of a text file and print the results as a table.

    Args:
        model: Loaded model
        path: File with one sentence per line
        console: Console to render to
        max_workers: Threads used for scoring

    Returns:
        Perplexity of each line, in file order
    """
    sentences = Path(path).read_text(encoding='utf-8').splitlines()

    with console.status(f"[cyan]Scoring {len(sentences):,} sentences..."):
        log_probs = model.sentence_log_probs(sentences, max_workers=max_workers)

    scores = [perplexity_from_log_prob(*pair) for pair in log_probs]
    corpus_perplexity = perplexity_from_log_prob(
        sum(log_prob_sum for log_prob_sum, _ in log_probs),
        sum(num_words for _, num_words in log_probs)
    )

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Sentence", style="white")
    table.add_column("Tokens", justify="right")
    table.add_column("Perplexity", style="yellow", justify="right")

    for idx, (sentence, (_, num_words), score) in enumerate(zip(sentences, log_probs, scores), 1):
        table.add_row(str(idx), escape(sentence), str(num_words), f"{score:,.4f}")

    console.print(table)
    console.print(f"[green]Corpus perplexity:[/green] {corpus_perplexity:,.4f}")

    return scores
