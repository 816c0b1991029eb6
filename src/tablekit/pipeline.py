"""Entry points: text -> TableModel -> text.

    raw text -> detect_format -> parse_markdown / parse_html -> TableModel
             -> GENERATORS[format] -> output text
"""

import logging

from tablekit.detection import detect_format
from tablekit.formatting import GENERATORS
from tablekit.parsing import parse_html, parse_markdown
from tablekit.schema import OutputFormat, TableModel

logger = logging.getLogger(__name__)

_PARSERS = {
    OutputFormat.MARKDOWN: parse_markdown,
    OutputFormat.HTML: parse_html,
}


def parse(text: str) -> TableModel:
    """Detect the input format and parse it.  Raises a ParseError subclass on failure."""
    fmt = detect_format(text)
    return _PARSERS[fmt](text.strip())


def serialize(model: TableModel, fmt: OutputFormat | str) -> str:
    """Render *model* as markdown, json or html.  Unknown formats raise ValueError."""
    return GENERATORS[OutputFormat(fmt)](model)


def convert(text: str, fmt: OutputFormat | str) -> str:
    """Parse *text* and serialize the result in one step."""
    model = parse(text)
    output = serialize(model, fmt)
    logger.info("Converted %d x %d table to %s", model.row_count, model.column_count, OutputFormat(fmt).value)
    return output
