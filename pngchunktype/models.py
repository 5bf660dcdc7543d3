import itertools
import logging

import attr

from pngchunktype import exceptions as exc


logger = logging.getLogger(__name__)

PNG_CHUNK_TYPE_CODE_LENGTH = 4
PNG_CHUNK_TYPE_ASCII_BYTES = frozenset(range(128))
PNG_CHUNK_TYPE_UPPERCASE_BYTES = frozenset(range(65, 91))
PNG_CHUNK_TYPE_LOWERCASE_BYTES = frozenset(range(97, 123))
PNG_CHUNK_TYPE_CODE_ALLOWED_BYTES = (
    PNG_CHUNK_TYPE_UPPERCASE_BYTES | PNG_CHUNK_TYPE_LOWERCASE_BYTES)
# Accepted by ChunkType.from_bytes, which also lets digits through
PNG_CHUNK_TYPE_ALPHANUMERIC_BYTES = frozenset(
    itertools.chain(PNG_CHUNK_TYPE_CODE_ALLOWED_BYTES, range(48, 58)))


_valid_bytes = attr.validators.instance_of(bytes)


def _valid_chunk_type_code(instance, attribute, value):
    _valid_bytes(instance, attribute, value)
    if len(value) != PNG_CHUNK_TYPE_CODE_LENGTH:
        raise exc.InvalidLength(
            "{!r} must be exactly 4 bytes long, got {}".format(
                attribute.name, len(value)),
            length=len(value),
        )
    if not PNG_CHUNK_TYPE_ASCII_BYTES.issuperset(value):
        raise exc.InvalidEncoding(
            "{!r} must be ASCII, got {!r}".format(attribute.name, value))


@attr.attributes(frozen=True)
class ChunkType:
    """
    The 4 byte type code of a PNG chunk.

    The case of each byte encodes one property of the chunk type:

    ====  ===================  =================  ===============
    Byte  Property             Uppercase          Lowercase
    ====  ===================  =================  ===============
    0     ancillary bit        critical           ancillary
    1     private bit          public             private
    2     reserved bit         valid              invalid
    3     safe-to-copy bit     unsafe to copy     safe to copy
    ====  ===================  =================  ===============

    Build instances with :meth:`from_bytes` or :meth:`from_str`. The two
    factories validate differently: raw bytes must be ASCII alphanumeric,
    text only needs to be ASCII. :meth:`is_valid` applies the strict rule
    (alphabetic, reserved bit set) to an instance from either path.

    :ivar code: The type code
    :type code: bytes
    """
    code = attr.attr(validator=_valid_chunk_type_code)  # type: bytes

    @classmethod
    def from_bytes(cls, code):
        """
        Build a chunk type from 4 raw bytes.

        :param code: bytes-like object or iterable of 4 ints
        :raises exceptions.InvalidLength: if there are not 4 bytes
        :raises exceptions.InvalidChunkType:
            if any byte is not an ASCII letter or digit
        """
        if isinstance(code, int):
            # bytes(4) would make 4 zero bytes
            raise TypeError("Expected bytes, got int")
        code = bytes(code)
        if len(code) != PNG_CHUNK_TYPE_CODE_LENGTH:
            raise exc.InvalidLength(
                "Expected 4 bytes, got {}".format(len(code)),
                length=len(code),
            )
        if not PNG_CHUNK_TYPE_ALPHANUMERIC_BYTES.issuperset(code):
            raise exc.InvalidChunkType(
                "Invalid chunk type: {!r}".format(list(code)),
                code=code,
            )
        logger.debug('Chunk type %r from bytes', code)
        return cls(code)

    @classmethod
    def from_str(cls, text):
        """
        Build a chunk type from 4 ASCII characters.

        Non-ASCII text is rejected before the length is looked at, so
        ``'Rüst!'`` raises :exc:`exceptions.InvalidEncoding`, not
        :exc:`exceptions.InvalidLength`. Digits and punctuation are
        accepted here; see :meth:`is_valid`.
        """
        if not isinstance(text, str):
            raise TypeError(
                "Expected str, got {}".format(type(text).__name__))
        try:
            code = text.encode('ascii')
        except UnicodeEncodeError as e:
            raise exc.InvalidEncoding(
                "The string contains non-ascii characters: {!r}".format(text)
            ) from e
        if len(code) != PNG_CHUNK_TYPE_CODE_LENGTH:
            raise exc.InvalidLength(
                "Invalid string length. Expected 4, got {}".format(len(code)),
                length=len(code),
            )
        logger.debug('Chunk type %r from str', code)
        return cls(code)

    def __bytes__(self):
        return self.code

    def __str__(self):
        return self.code.decode('ascii')

    def is_critical(self):
        # pylint: disable=unsubscriptable-object
        return self.code[0] in PNG_CHUNK_TYPE_UPPERCASE_BYTES

    def is_public(self):
        # pylint: disable=unsubscriptable-object
        return self.code[1] in PNG_CHUNK_TYPE_UPPERCASE_BYTES

    def is_reserved_bit_valid(self):
        # pylint: disable=unsubscriptable-object
        return self.code[2] in PNG_CHUNK_TYPE_UPPERCASE_BYTES

    def is_safe_to_copy(self):
        # pylint: disable=unsubscriptable-object
        return self.code[3] in PNG_CHUNK_TYPE_LOWERCASE_BYTES

    def is_valid(self):
        """
        Return ``True`` if every byte is an ASCII letter and the
        reserved bit is valid (byte 2 uppercase).
        """
        return (
            PNG_CHUNK_TYPE_CODE_ALLOWED_BYTES.issuperset(self.code) and
            self.is_reserved_bit_valid()
        )

    @property
    def ancillary(self):
        return not self.is_critical()

    @property
    def private(self):
        return not self.is_public()

    @property
    def reserved(self):
        return not self.is_reserved_bit_valid()

    @property
    def safe_to_copy(self):
        return self.is_safe_to_copy()
