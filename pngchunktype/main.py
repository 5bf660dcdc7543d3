import sys
import logging

from pngchunktype import chunktypes
from pngchunktype.exceptions import ChunkTypeError
from pngchunktype.models import ChunkType

logger = logging.getLogger(__name__)

USAGE = 'usage: pngchunktype CODE [CODE ...]'


def log_chunk_type(chunk_type):
    name = chunktypes.CHUNK_TYPE_NAMES.get(chunk_type, 'unregistered')
    logger.info(
        '%s (%s): critical=%s public=%s reserved_bit_valid=%s '
        'safe_to_copy=%s valid=%s',
        chunk_type, name,
        chunk_type.is_critical(),
        chunk_type.is_public(),
        chunk_type.is_reserved_bit_valid(),
        chunk_type.is_safe_to_copy(),
        chunk_type.is_valid(),
    )


def main(argv=None):
    """
    Classify each chunk type code given on the command line.

    Returns the exit status: 0 if every code parsed, 1 if any did not,
    2 on a usage error.
    """
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print(USAGE, file=sys.stderr)
        return 2
    logging.basicConfig(stream=sys.stderr, level=logging.DEBUG)
    status = 0
    for text in argv:
        try:
            chunk_type = ChunkType.from_str(text)
        except ChunkTypeError as e:
            logger.error('%r: %s', text, e)
            status = 1
            continue
        log_chunk_type(chunk_type)
    return status
