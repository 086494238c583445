# responder.py
import logging
import random
from types import MappingProxyType

import config
from responses import FALLBACK_RESPONSE, MAX_DEFAULT_LINES, MAX_RESPONSE_LINES

logger = logging.getLogger(__name__)


def _iter_blocks(lines):
    """Yield each run of non-blank lines as a list, terminators stripped."""
    block = []
    for line in lines:
        line = line.rstrip('\r\n')
        if not line.strip():
            if block:
                yield block
            block = []
            continue
        block.append(line)
    # last block may have no trailing blank line
    if block:
        yield block


def parse_response_map(lines):
    """Build the keyword -> response table from keyed blocks.

    The first line of a block is `keyword` or `keyword,first line` (split on the
    first comma only). Following lines are appended as they are, up to
    MAX_RESPONSE_LINES in total. A keyword with no response lines is dropped.
    """
    response_map = {}
    for block in _iter_blocks(lines):
        key, sep, rest = block[0].partition(',')
        key = key.strip()
        if not key:
            logger.debug("Skipping block with empty keyword: %r", block[0])
            continue
        values = [rest.strip()] if sep else []
        values.extend(block[1:])
        values = values[:MAX_RESPONSE_LINES]
        if not values:
            logger.debug("Keyword %r has no response lines, skipped", key)
            continue
        response_map[key] = "\n".join(values)
    return response_map


def parse_default_responses(lines):
    # the whole first line counts, no keyword split here
    return ["\n".join(block[:MAX_DEFAULT_LINES]) for block in _iter_blocks(lines)]


def load_response_map(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            response_map = parse_response_map(f)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Unable to read responses file %s: %s", path, e)
        return {}
    logger.info("Loaded %d keyword responses from %s", len(response_map), path)
    return response_map


def load_default_responses(path):
    defaults = []
    try:
        with open(path, 'r', encoding='utf-8') as f:
            defaults = parse_default_responses(f)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Unable to read %s: %s", path, e)
    # never leave the default list empty
    if not defaults:
        defaults.append(FALLBACK_RESPONSE)
    logger.info("Loaded %d default responses from %s", len(defaults), path)
    return defaults


def split_words(text):
    if not text:
        return set()
    return set(text.strip().lower().split())


class Responder:
    """Generates canned replies for a set of input words.

    A reply is the mapped response of the first recognised keyword in `words`
    (in the set's own iteration order), or a random default response when no
    word is recognised. Both tables are loaded once here and never change.
    """

    def __init__(self, responses_file=None, defaults_file=None, rng=None):
        self.responses_file = responses_file or config.RESPONSES_FILE
        self.defaults_file = defaults_file or config.DEFAULT_RESPONSES_FILE
        self._response_map = load_response_map(self.responses_file)
        self._default_responses = tuple(load_default_responses(self.defaults_file))
        self._rng = rng if rng is not None else random.Random()

    @property
    def response_map(self):
        return MappingProxyType(self._response_map)

    @property
    def default_responses(self):
        return self._default_responses

    def generate_response(self, words):
        for word in words:
            response = self._response_map.get(word)
            if response is not None:
                return response
        # nothing recognised
        return self.pick_default_response()

    def pick_default_response(self):
        index = self._rng.randrange(len(self._default_responses))
        return self._default_responses[index]
