import json
import sys

import click

from boxingpython.ai.analyzer import BoxingAnalyzer
from boxingpython.ai.config import get_analysis_settings
from boxingpython.ai.exceptions import BackendError
from boxingpython.ai.inference import create_inference_client
from boxingpython.ai.mock import MockSynthesizer
from boxingpython.base.exceptions import InputValidationError
from boxingpython.base.record import AnalysisEnvelope
from boxingpython.base.upload import VideoUpload
from boxingpython.utils.logger import setup_logger


@click.group(help="Boxing training video analysis.")
@click.option("--log-level", default=None, help="Logging level, defaults to the LOG_LEVEL env var.", type=str)
def main(log_level: str | None):
    setup_logger(log_level)


@main.command(help="Analyzes a boxing training video and prints the result as JSON.")
@click.argument("video", type=click.Path(exists=True, dir_okay=False, readable=True))
@click.option(
    "-b",
    "--backend",
    default=None,
    help="Inference backend. Defaults to the configured one.",
    type=click.Choice(["gemini", "openai"]),
)
@click.option("-m", "--model", default=None, help="Model name for the backend.", type=str)
@click.option("-k", "--api-key", default=None, help="API key, read from the environment if omitted.", type=str)
@click.option("--media-type", default=None, help="Media type of the video, guessed from the suffix if omitted.")
@click.option("--no-gate", is_flag=True, default=False, help="Skip the boxing relevance check.")
@click.option("--mock-only", is_flag=True, default=False, help="Produce a placeholder analysis without a model.")
@click.option("--pretty", is_flag=True, default=False, help="Indent the JSON output.")
def analyze(
    video: str,
    backend: str | None,
    model: str | None,
    api_key: str | None,
    media_type: str | None,
    no_gate: bool,
    mock_only: bool,
    pretty: bool,
):
    try:
        upload = VideoUpload.from_path(video, media_type=media_type).validate()
    except InputValidationError as e:
        _echo(AnalysisEnvelope.failure(str(e)), pretty)
        sys.exit(1)

    if mock_only:
        _echo(AnalysisEnvelope.ok(MockSynthesizer().synthesize(upload.size, upload.filename)), pretty)
        return

    try:
        client = create_inference_client(backend=backend, model=model, api_key=api_key)
    except BackendError as e:
        raise click.ClickException(str(e)) from e

    gate = not (no_gate or get_analysis_settings()["skip_relevance_gate"])
    envelope = BoxingAnalyzer(client, gate=gate).analyze(upload)
    _echo(envelope, pretty)
    if not envelope.success:
        sys.exit(1)


def _echo(envelope: AnalysisEnvelope, pretty: bool) -> None:
    click.echo(json.dumps(envelope.to_dict(), indent=2 if pretty else None))


if __name__ == "__main__":
    main()
