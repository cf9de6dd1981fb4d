"""
Process Subcommand Module

Runs the deterministic post-processing on model responses that were
saved earlier, without contacting any vision provider. Useful for
re-curating old responses after a configuration change and for
debugging classification.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from stockmeta.processing.parser import parse_response
from stockmeta.processing.tokenizer import tokenize
from stockmeta.schemas.metadata import ProcessingMode

from .help_texts import MODE_HELP, PROCESS_HELP, ExitCodes
from .shared_options import config_option, keyword_bounds_options, load_configuration, log_level_option


logger = logging.getLogger(__name__)


@click.command(help=PROCESS_HELP)
@click.argument("responses", nargs=-1, type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option(
    "--mode",
    type=click.Choice([m.value for m in ProcessingMode], case_sensitive=False),
    default=ProcessingMode.METADATA.value,
    help=MODE_HELP,
)
@click.option("--output", "-o", type=click.Path(), default=None, help="Write JSON here instead of stdout")
@click.option("--explain", is_flag=True, help="Include the category scoring trace in the output")
@config_option()
@keyword_bounds_options
@log_level_option()
def process(
    responses: Tuple[str, ...],
    mode: str,
    output: Optional[str],
    explain: bool,
    config: Optional[str],
    keyword_max: Optional[int],
    keyword_min: Optional[int],
    log_level: Optional[str],
):
    """Turn saved model responses into metadata JSON.

    Each RESPONSES argument is a text file holding one raw model response;
    use '-' (or no argument) to read a single response from stdin.

    Examples:
        stockmeta process response.txt
        cat response.txt | stockmeta process --explain
        stockmeta process responses/*.txt -o metadata.json
    """
    app_config = load_configuration(config, log_level, keyword_max=keyword_max, keyword_min=keyword_min)
    processor = app_config.processing.build_processor()
    processing_mode = ProcessingMode(mode.lower())

    results = []
    for source in responses or ("-",):
        raw_text, name = _read_response(source)
        if processing_mode == ProcessingMode.PROMPT:
            entry = processor.process_prompt(raw_text).model_dump()
        else:
            entry = processor.process(raw_text, name).model_dump(mode="json")
            if explain:
                entry["classification"] = _trace(processor, raw_text)
        entry["source"] = name
        results.append(entry)

    payload = results[0] if len(results) == 1 else results
    text = json.dumps(payload, indent=2, ensure_ascii=False)

    if output:
        try:
            Path(output).parent.mkdir(parents=True, exist_ok=True)
            Path(output).write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            click.echo(f"❌ Cannot write {output}: {e}", err=True)
            sys.exit(ExitCodes.GENERAL_ERROR)
        click.echo(f"Output saved to: {output}", err=True)
    else:
        click.echo(text)


def _read_response(source: str) -> Tuple[str, str]:
    if source == "-":
        return click.get_text_stream("stdin").read(), "<stdin>"
    path = Path(source)
    return path.read_text(encoding="utf-8", errors="replace"), path.name


def _trace(processor, raw_text: str) -> dict:
    """Re-run classification and return its decision trace."""
    fields = parse_response(raw_text)
    tokens = tokenize(fields.title, fields.keywords, fields.description, fields.category_text)
    trace = processor.classifier.explain(tokens, fields.category_text)
    return {
        "code": trace.code,
        "bias": trace.bias,
        "ai_code": trace.ai_code,
        "ai_score": trace.ai_score,
        "rule_code": trace.rule_code,
        "rule_score": trace.rule_score,
        "scores": {str(code): score for code, score in trace.scores.items() if score},
    }
