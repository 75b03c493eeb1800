"""
Packing and unpacking of risk scores into a single integer.

Each score occupies a fixed-width binary field. Fields are concatenated
most-significant first, so the first score lands in the highest bits.

Scores wider than the field are NOT truncated by default: the field is
emitted at its natural width and every following field shifts left.
Pass ``strict=True`` to reject such input instead.
"""

from typing import List, Sequence, Tuple

DEFAULT_BITS_PER_SCORE = 5
DEFAULT_TOTAL_SCORES = 7


class ScoreRangeError(ValueError):
    """Raised when a score or packed value falls outside the field layout."""
    pass


def _check_width(bits_per_score: int) -> None:
    if bits_per_score < 1:
        raise ValueError(f"bits_per_score must be a positive integer, got {bits_per_score}")


def score_fields(scores: Sequence[int], bits_per_score: int = DEFAULT_BITS_PER_SCORE) -> List[str]:
    """Return each score as a zero-padded binary field."""
    _check_width(bits_per_score)
    fields = []
    for score in scores:
        if score < 0:
            raise ScoreRangeError(f"Score must be non-negative, got {score}")
        fields.append(format(score, "b").zfill(bits_per_score))
    return fields


def value_chunks(
    value: int,
    total_scores: int = DEFAULT_TOTAL_SCORES,
    bits_per_score: int = DEFAULT_BITS_PER_SCORE,
) -> Tuple[str, List[str]]:
    """
    Split a packed value into binary chunks.

    Returns:
        (binary, chunks) where binary is the value zero-padded to
        total_scores * bits_per_score digits and chunks are its
        bits_per_score-wide slices, left to right. The last chunk may be
        shorter when the value overflows the padded width.
    """
    _check_width(bits_per_score)
    if value < 0:
        raise ScoreRangeError(f"Packed value must be non-negative, got {value}")

    total_digits = total_scores * bits_per_score
    binary = format(value, "b").zfill(total_digits) if value else "0" * total_digits
    chunks = [binary[i:i + bits_per_score] for i in range(0, len(binary), bits_per_score)]
    return binary, chunks


def encode(
    scores: Sequence[int],
    bits_per_score: int = DEFAULT_BITS_PER_SCORE,
    strict: bool = False,
) -> int:
    """
    Pack scores into one integer.

    Args:
        scores: Ordered scores; the first becomes the most-significant field
        bits_per_score: Width of each field in bits
        strict: Reject scores that do not fit in bits_per_score bits

    Raises:
        ScoreRangeError: On negative scores, or out-of-range scores in strict mode

    Example:
        >>> encode([3, 4, 5, 4, 3, 4, 2])
        3360820354
    """
    _check_width(bits_per_score)
    if strict:
        limit = 1 << bits_per_score
        for position, score in enumerate(scores):
            if not 0 <= score < limit:
                raise ScoreRangeError(
                    f"Score {score} at position {position} does not fit in {bits_per_score} bits"
                )

    binary = "".join(score_fields(scores, bits_per_score))
    return int(binary, 2) if binary else 0


def decode(
    value: int,
    total_scores: int = DEFAULT_TOTAL_SCORES,
    bits_per_score: int = DEFAULT_BITS_PER_SCORE,
    strict: bool = False,
) -> List[int]:
    """
    Unpack an integer into scores.

    A value wider than total_scores * bits_per_score bits is chunked from
    the left without truncation, so the result has more than total_scores
    elements.

    Raises:
        ScoreRangeError: On negative values, or overflowing values in strict mode
    """
    _check_width(bits_per_score)
    if strict and value.bit_length() > total_scores * bits_per_score:
        raise ScoreRangeError(
            f"Value {value} needs {value.bit_length()} bits, "
            f"more than {total_scores} x {bits_per_score}"
        )

    _, chunks = value_chunks(value, total_scores, bits_per_score)
    return [int(chunk, 2) for chunk in chunks]
