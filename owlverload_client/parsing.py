"""Parser for the six-line text blob returned by the image endpoint.

The server answers with numbered, labelled lines in a fixed order::

    1. Product Name: ...
    2. Expiry Date: ...
    3. Ingredients: ...
    4. Alcohol: ...
    5. Halal: ...
    6. Reasoning: ...

The format is positional. Any other shape (missing lines, extra lines,
reordered or relabelled fields) raises ``AnalysisParseError``; nothing is
guessed or repaired.
"""
from dataclasses import astuple
from typing import Any

from owlverload_client.constants import (
    FIELD_ANALYSIS,
    FIELD_PAYLOAD,
    IMAGE_ANALYSIS_LABELS,
    MSG_PARSE_LABEL,
    MSG_PARSE_LINE_COUNT,
    MSG_PARSE_MULTILINE,
    MSG_PARSE_NO_ANALYSIS,
)
from owlverload_client.errors import AnalysisParseError
from owlverload_client.models import ProductImageAnalysis


def _strip_label(index: int, line: str, label: str) -> str:
    match line.strip().startswith(label):
        case True:
            return line.strip()[len(label):].strip()
        case False:
            raise AnalysisParseError(MSG_PARSE_LABEL % (index + 1, label))


def parse_image_analysis(text: str) -> ProductImageAnalysis:
    lines = text.strip().replace("\r\n", "\n").split("\n")
    match len(lines) == len(IMAGE_ANALYSIS_LABELS):
        case True:
            pass
        case False:
            raise AnalysisParseError(
                MSG_PARSE_LINE_COUNT % (len(IMAGE_ANALYSIS_LABELS), len(lines))
            )
    values = [
        _strip_label(i, line, label)
        for i, (line, label) in enumerate(zip(lines, IMAGE_ANALYSIS_LABELS))
    ]
    return ProductImageAnalysis(*values)


def format_image_analysis(analysis: ProductImageAnalysis) -> str:
    values = astuple(analysis)
    broken = [
        label for label, v in zip(IMAGE_ANALYSIS_LABELS, values) if "\n" in v or "\r" in v
    ]
    match broken:
        case [label, *_]:
            raise AnalysisParseError(MSG_PARSE_MULTILINE % label)
        case []:
            return "\n".join(f"{label} {v}" for label, v in zip(IMAGE_ANALYSIS_LABELS, values))


def parse_image_response(response: dict[str, Any]) -> ProductImageAnalysis:
    """Pull ``payload.analysis`` out of an image-endpoint response and parse it."""
    payload = response.get(FIELD_PAYLOAD)
    text = payload.get(FIELD_ANALYSIS) if isinstance(payload, dict) else None
    match text:
        case str():
            return parse_image_analysis(text)
        case _:
            raise AnalysisParseError(MSG_PARSE_NO_ANALYSIS)
