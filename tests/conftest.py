import pytest


@pytest.fixture
def write_table(tmp_path):
    """Write lines to a table file and return its path."""
    def _write(name, lines, encoding='utf-8'):
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding=encoding)
        return path
    return _write


@pytest.fixture
def table_files(write_table):
    unigrams = write_table("unigrams.txt", [
        "the 0.06",
        "cat 0.5",
        "sat 0.02",
        ", 0.04",
    ])
    bigrams = write_table("bigrams.txt", [
        "# the 0.3",
        "the cat 0.1",
        "cat sat 0.25",
    ])
    return unigrams, bigrams
