from __future__ import annotations

import json
import logging
import time
from pathlib import Path

import typer

from anaso_algorithm import AppConfig, default_config, load_config
from anaso_algorithm.schemas import ScoreBreakdown, ScoringInput
from anaso_algorithm.scoring import explain_score, score_post

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

logger = logging.getLogger(__name__)

app = typer.Typer(help="Anaso post ranking CLI")


@app.command("score")
def score_command(
    time_posted: int | None = typer.Option(
        None,
        "--time-posted",
        "-t",
        help="Unix timestamp in seconds the post was submitted. Defaults to now.",
    ),
    likes: int = typer.Option(
        0,
        "--likes",
        "-l",
        help="Total number of likes the post has received.",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help="Optional config file path (JSON or YAML).",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the result as JSON regardless of config.",
    ),
) -> None:
    """Compute the ranking score for one post."""
    config = _load_app_config(config_path)
    data = _build_input(time_posted=time_posted, likes=likes)

    value = score_post(data)
    logger.info(
        "scored post time_posted=%d likes=%d score=%d",
        data.time_posted,
        data.likes,
        value,
    )

    if as_json or config.output.format == "json":
        payload = {**data.model_dump(mode="json"), "score": value}
        typer.echo(json.dumps(payload, indent=config.output.indent or None))
        return
    typer.echo(str(value))


@app.command("explain")
def explain_command(
    time_posted: int | None = typer.Option(
        None,
        "--time-posted",
        "-t",
        help="Unix timestamp in seconds the post was submitted. Defaults to now.",
    ),
    likes: int = typer.Option(
        0,
        "--likes",
        "-l",
        help="Total number of likes the post has received.",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help="Optional config file path (JSON or YAML).",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the breakdown as JSON regardless of config.",
    ),
) -> None:
    """Show the recency and popularity terms behind a score."""
    config = _load_app_config(config_path)
    data = _build_input(time_posted=time_posted, likes=likes)
    breakdown = explain_score(data)

    if as_json or config.output.format == "json":
        typer.echo(breakdown.model_dump_json(indent=config.output.indent or None))
        return
    typer.echo(_render_breakdown_table(breakdown))


def _load_app_config(config_path: Path | None) -> AppConfig:
    if config_path is None:
        config = default_config()
    else:
        try:
            config = load_config(config_path)
        except ValueError as exc:
            typer.echo(str(exc), err=True)
            raise typer.Exit(code=1) from exc

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(config.log_level)
    return config


def _build_input(*, time_posted: int | None, likes: int) -> ScoringInput:
    if time_posted is None:
        time_posted = int(time.time())
        logger.debug("time_posted not given, using now=%d", time_posted)
    return ScoringInput(time_posted=time_posted, likes=likes)


def _render_breakdown_table(breakdown: ScoreBreakdown) -> str:
    headers = ("term", "value")
    rows = [
        ("recency", str(breakdown.recency)),
        ("popularity", str(breakdown.popularity)),
        ("score", str(breakdown.score)),
    ]

    widths = [
        max(len(headers[column]), *(len(row[column]) for row in rows))
        for column in range(len(headers))
    ]

    def _line(values: tuple[str, str]) -> str:
        return " | ".join(
            value.ljust(widths[index]) for index, value in enumerate(values)
        )

    divider = "-+-".join("-" * width for width in widths)
    body = [_line(headers), divider]
    body.extend(_line(row) for row in rows)
    return "\n".join(body)


def main() -> None:
    """CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
