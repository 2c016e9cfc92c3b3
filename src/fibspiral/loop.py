import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from fibspiral.cli.commands.run import run_command

app = typer.Typer(help="Animated Fibonacci spiral.")

app.command(name="run")(run_command)


@app.callback()
def main_callback() -> None:
    """Fibonacci spiral viewer. Space pauses, Tab swaps mode, Esc quits."""


def main() -> None:
    app()


if __name__ == "__main__":
    main()
