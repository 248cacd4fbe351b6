import typer
from pydantic import ValidationError

from .config import TimerConfig
from .UI import UI

app = typer.Typer(add_completion=False)

@app.command()
def main(
    duration: int = typer.Option(
        1, "--duration", min=1, help="Set the duration for the timer in minutes",
    ),
    exit_on_timeout: bool = typer.Option(
        True, "--exit-on-timeout/--no-exit-on-timeout",
        help="Quit as soon as the time is up.",
    ),
    paused: bool = typer.Option(
        False, "--paused",
        help="Wait for s before counting down.",
    ),
) -> None:
    '''
    Count down from `--duration` minutes, starting right away.
    Keys: s start/stop, r reset, q quit.
    '''
    try:
        config = TimerConfig(
            duration_minutes=duration, exit_on_timeout=exit_on_timeout,
            start_paused=paused,
        )
    except ValidationError as e:
        raise typer.BadParameter(str(e)) from e

    ui = UI.fromConfig(config)
    try:
        ui.run()
    except Exception as e:
        typer.echo(f"Uh oh, we encountered an error: {e}", err=True)
        raise typer.Exit(code=1) from e
    if ui.return_code:
        raise typer.Exit(code=ui.return_code)
