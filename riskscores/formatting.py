"""Human-readable traces for packed score conversions."""

from typing import Sequence

from .codec import (
    DEFAULT_BITS_PER_SCORE,
    DEFAULT_TOTAL_SCORES,
    decode,
    score_fields,
    value_chunks,
)


def _pad_decimals(values: Sequence[int], width: int) -> str:
    return " | ".join(str(v).rjust(width) for v in values)


def render_encoding(
    scores: Sequence[int],
    bits_per_score: int = DEFAULT_BITS_PER_SCORE,
    verbose: bool = False,
) -> str:
    """
    Render the result of packing scores.

    Short form is the decimal value. Verbose form is three lines showing
    the scores, their binary fields and the packed decimal.
    """
    fields = score_fields(scores, bits_per_score)
    binary = "".join(fields)
    decimal = int(binary, 2) if binary else 0

    if not verbose:
        return str(decimal)

    return "\n".join([
        f"1. Decimal notations: {_pad_decimals(scores, bits_per_score)}",
        f"2. Binary notations:  {' | '.join(fields)} => {binary}",
        f"3. Decimal notation:  {decimal} = {binary}",
    ])


def render_decoding(
    value: int,
    total_scores: int = DEFAULT_TOTAL_SCORES,
    bits_per_score: int = DEFAULT_BITS_PER_SCORE,
    verbose: bool = False,
) -> str:
    """
    Render the result of unpacking a value.

    Short form is the list of scores. Verbose form is three lines showing
    the padded binary string, its chunks and the decoded scores.
    """
    scores = decode(value, total_scores, bits_per_score)

    if not verbose:
        return str(scores)

    binary, chunks = value_chunks(value, total_scores, bits_per_score)
    return "\n".join([
        f"1. Binary number:      {binary}",
        f"2. Binary notations:   {' | '.join(chunks)}",
        f"3. Decimal notations:  {_pad_decimals(scores, bits_per_score)}",
    ])
