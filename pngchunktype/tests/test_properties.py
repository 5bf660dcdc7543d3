"""
Property-based tests for ChunkType construction and classification.
"""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from pngchunktype.exceptions import (
    InvalidChunkType, InvalidEncoding, InvalidLength,
)
from pngchunktype.models import (
    ChunkType,
    PNG_CHUNK_TYPE_ALPHANUMERIC_BYTES,
    PNG_CHUNK_TYPE_CODE_ALLOWED_BYTES,
)


ascii_chars = st.characters(max_codepoint=127)
non_ascii_chars = st.characters(min_codepoint=128)


def alphanumeric_codes():
    alphabet = st.sampled_from(sorted(PNG_CHUNK_TYPE_ALPHANUMERIC_BYTES))
    return st.lists(alphabet, min_size=4, max_size=4).map(bytes)


@st.composite
def codes_with_bad_byte(draw):
    """4 bytes, at least one of them not an ASCII letter or digit"""
    code = draw(st.lists(
        st.integers(min_value=0, max_value=255), min_size=4, max_size=4))
    bad = sorted(set(range(256)) - PNG_CHUNK_TYPE_ALPHANUMERIC_BYTES)
    position = draw(st.integers(min_value=0, max_value=3))
    code[position] = draw(st.sampled_from(bad))
    return bytes(code)


@st.composite
def text_with_non_ascii(draw):
    text = draw(st.text(alphabet=ascii_chars, max_size=8))
    position = draw(st.integers(min_value=0, max_value=len(text)))
    return text[:position] + draw(non_ascii_chars) + text[position:]


@given(alphanumeric_codes())
def test_from_bytes_accepts_alphanumeric(code):
    assert ChunkType.from_bytes(code).code == code


@given(codes_with_bad_byte())
def test_from_bytes_rejects_other_bytes(code):
    with pytest.raises(InvalidChunkType):
        ChunkType.from_bytes(code)


@given(st.text(alphabet=ascii_chars, min_size=4, max_size=4))
def test_from_str_round_trip(text):
    assert str(ChunkType.from_str(text)) == text


@given(st.text(alphabet=ascii_chars, max_size=12).filter(
    lambda text: len(text) != 4))
def test_from_str_rejects_length(text):
    with pytest.raises(InvalidLength):
        ChunkType.from_str(text)


@given(text_with_non_ascii())
def test_from_str_rejects_non_ascii_any_length(text):
    with pytest.raises(InvalidEncoding):
        ChunkType.from_str(text)


@given(st.text(alphabet=ascii_chars, min_size=4, max_size=4))
def test_predicates_follow_case(text):
    chunk_type = ChunkType.from_str(text)
    assert chunk_type.is_critical() is ('A' <= text[0] <= 'Z')
    assert chunk_type.is_public() is ('A' <= text[1] <= 'Z')
    assert chunk_type.is_reserved_bit_valid() is ('A' <= text[2] <= 'Z')
    assert chunk_type.is_safe_to_copy() is ('a' <= text[3] <= 'z')


@given(st.text(alphabet=ascii_chars, min_size=4, max_size=4))
def test_is_valid(text):
    chunk_type = ChunkType.from_str(text)
    expected = (
        PNG_CHUNK_TYPE_CODE_ALLOWED_BYTES.issuperset(chunk_type.code) and
        text[2].isupper()
    )
    assert chunk_type.is_valid() is expected
