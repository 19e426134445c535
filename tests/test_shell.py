import io

import pytest
from rich.console import Console

from bigram import BigramPerplexityModel
from bigram.errors import NumericParseError
from bigram.shell import (
    create_stats_table, interactive_shell, load_model_cli, score_file_cli
)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), force_terminal=False, color_system=None, width=200)


def output(console):
    return console.file.getvalue()


class TestInteractiveShell:
    def test_scores_each_line_until_eof(self, console):
        model = BigramPerplexityModel({"cat": 0.5}, {"# cat": 0.3})
        interactive_shell(model, console=console, stream=io.StringIO("cat\nHello World\n"))

        text = output(console)
        assert text.count("Enter a sentence:") == 3
        assert f"perplexity: {model.compute_sentence('cat')}" in text
        assert f"perplexity: {model.compute_sentence('Hello World')}" in text

    def test_blank_line_scores_zero(self, console):
        interactive_shell(BigramPerplexityModel(), console=console, stream=io.StringIO("\n"))
        assert "perplexity: 0.0" in output(console)

    def test_trims_input(self, console):
        model = BigramPerplexityModel({"cat": 0.5})
        interactive_shell(model, console=console, stream=io.StringIO("   cat  \n"))
        assert f"perplexity: {model.compute_sentence('cat')}" in output(console)

    @pytest.mark.parametrize("word", ["quit", "exit", "q", "QUIT"])
    def test_quit_words(self, console, word):
        interactive_shell(BigramPerplexityModel(), console=console,
                          stream=io.StringIO(f"{word}\nhello\n"))
        assert "perplexity" not in output(console)


class TestLoadModelCli:
    def test_prints_statistics(self, console, table_files):
        model = load_model_cli(*table_files, console=console)
        text = output(console)
        assert "Model loaded from" in text
        assert "Unigrams" in text
        assert "Bigram Weight" in text
        assert len(model.bigrams) == 3

    def test_propagates_load_errors(self, console, write_table, table_files):
        bad = write_table("bad.txt", ["a b notanumber"])
        with pytest.raises(NumericParseError):
            load_model_cli(table_files[0], bad, console=console)


class TestScoreFileCli:
    def test_scores_every_line(self, console, tmp_path, table_files):
        model = BigramPerplexityModel.from_files(*table_files)
        sentences = tmp_path / "sentences.txt"
        sentences.write_text("The cat sat.\n[odd] line\n\n", encoding='utf-8')

        scores = score_file_cli(model, sentences, console=console, max_workers=2)

        assert scores == [
            model.compute_sentence("The cat sat."),
            model.compute_sentence("[odd] line"),
            0.0,
        ]
        text = output(console)
        assert "[odd] line" in text
        assert "Corpus perplexity" in text
        expected_corpus = model.perplexity(["The cat sat.", "[odd] line", ""])
        assert f"Corpus perplexity: {expected_corpus:,.4f}" in text

    def test_missing_file(self, console, tmp_path):
        with pytest.raises(OSError):
            score_file_cli(BigramPerplexityModel(), tmp_path / "nope.txt", console=console)


def test_create_stats_table_formats_values():
    table = create_stats_table({'unigrams': 12345, 'floor': 1e-6})
    console = Console(file=io.StringIO(), width=120)
    console.print(table)
    text = console.file.getvalue()
    assert "12,345" in text
    assert "1e-06" in text
