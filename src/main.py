from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.traceback import install

import canonhuff
from canonhuff.builder import FrequencyTable, HuffmanTree

console = Console()
install(show_locals=True)

app = typer.Typer()


def _read_input(text: str | None, file: Path | None) -> str:
    if file is not None:
        return file.read_text(encoding="utf-8")
    if text is None:
        raise typer.BadParameter("Give the input as an argument or with --file")
    return text


def _fail(e: Exception) -> NoReturn:
    console.print(f"[bold red]Unexpected error:[/] {escape(str(e))}")
    raise typer.Exit(1)


@app.command()
def table(
    text: str | None = typer.Argument(None, help="Text to build the code table from"),
    file: Path | None = typer.Option(
        None, "-f", "--file", help="Read the text from a file", exists=True, dir_okay=False, readable=True
    ),
    tree: bool = typer.Option(False, "--tree", help="Print the Huffman tree"),
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
) -> None:
    text = _read_input(text, file)
    try:
        code_table = canonhuff.build_code_table(text, is_logging=logging)
        frequency_table = FrequencyTable.from_text(text)
        if tree:
            HuffmanTree.from_frequency_table(frequency_table).print()
    except Exception as e:
        _fail(e)

    counts = frequency_table.counts
    output = Table("Symbol", "Count", "Length", "Code")
    for symbol, code in code_table.items():
        output.add_row(escape(repr(symbol)), str(counts[symbol]), str(len(code)), code)
    console.print(output)


@app.command()
def encode(
    text: str | None = typer.Argument(None, help="Text to encode"),
    file: Path | None = typer.Option(
        None, "-f", "--file", help="Read the text from a file", exists=True, dir_okay=False, readable=True
    ),
    table_path: Path | None = typer.Option(None, "-t", "--table", help="Write the code table as JSON", dir_okay=False),
    strategy: canonhuff.EncodeStrategy = typer.Option(
        canonhuff.EncodeStrategy.LOOKUP, "-s", "--strategy", help="How symbols are replaced by codes"
    ),
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
) -> None:
    text = _read_input(text, file)
    try:
        code_table = canonhuff.build_code_table(text, is_logging=logging)
        bit_string = canonhuff.encode(text, code_table, is_logging=logging, strategy=strategy)
        if table_path is not None:
            table_path.write_text(code_table.to_json(), encoding="utf-8")
    except Exception as e:
        _fail(e)

    console.print(bit_string, soft_wrap=True, highlight=False)


@app.command()
def decode(
    bits: str | None = typer.Argument(None, help="Bit string of '0' and '1' to decode"),
    table_path: Path = typer.Option(
        ..., "-t", "--table", help="Code table JSON written by encode", exists=True, dir_okay=False, readable=True
    ),
    file: Path | None = typer.Option(
        None, "-f", "--file", help="Read the bit string from a file", exists=True, dir_okay=False, readable=True
    ),
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
) -> None:
    bits = _read_input(bits, file).strip()
    try:
        code_table = canonhuff.CodeTable.from_json(table_path.read_text(encoding="utf-8"))
        text = canonhuff.decode(bits, code_table, is_logging=logging)
    except Exception as e:
        _fail(e)

    typer.echo(text)


@app.command()
def stats(
    text: str | None = typer.Argument(None, help="Text to measure"),
    file: Path | None = typer.Option(
        None, "-f", "--file", help="Read the text from a file", exists=True, dir_okay=False, readable=True
    ),
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
) -> None:
    text = _read_input(text, file)
    try:
        code_table = canonhuff.build_code_table(text, is_logging=logging)
        statistics = canonhuff.CodeStatistics(FrequencyTable.from_text(text), code_table)
    except Exception as e:
        _fail(e)

    console.print(f"Symbols: {len(text)} ({len(code_table)} distinct)")
    console.print(f"Entropy: {statistics.entropy():.4f} bits/symbol")
    console.print(f"Average code length: {statistics.average_code_length():.4f} bits/symbol")
    console.print(f"Encoded length: {statistics.encoded_length()} bits")
    console.print(f"Efficiency: {statistics.efficiency():.2%}")
    console.print(f"Compression ratio: {statistics.compression_ratio():.3f}")


if __name__ == "__main__":
    app()
