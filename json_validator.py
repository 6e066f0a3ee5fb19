# json_validator.py
# Stack-driven JSON validator for Coding United Challenge 3
# Author: Bradley Saucier - call sign viper1
#
# Disclaimer:
# This is a personal project submitted for a coding competition.
# It does not represent or reflect the views, policies, or positions
# of the United States Department of Defense or Anduril Industries.
#
# =============================================================================
#  VALIDATOR IMPLEMENTATION: EXPLICIT WORKLIST OVER TEXT FRAGMENTS
# =============================================================================
#
# The validator answers one question - is this text JSON? - and never builds
# a value tree. Work is kept on an explicit LIFO worklist of (text, depth)
# fragments instead of the host call stack:
#
# 1. The driver seeds the worklist with the whole input at depth -1.
# 2. A fragment shaped like {...} or [...] is a container. Its interior is
#    split on top-level commas and the children are pushed at depth + 1.
# 3. Anything else must be a leaf: string, number, true, false or null.
# 4. The root must be a container [RFC 8259 root constraint as used by
#    JSON_checker].
#
# The splitter tracks a small scope stack (object, array, string) so commas
# and brackets inside nested values or string literals stay opaque.
#
# Depth ceiling defaults to 18 entered levels below the root container,
# i.e. 19 nested containers pass and 20 fail (JSON_checker pass2 / fail18).
#
# =============================================================================
#  REFERENCES
# =============================================================================
# [1] RFC 8259 - The JavaScript Object Notation (JSON) standard
# [2] json.org/JSON_checker - pass/fail conformance fixtures
# [3] hypertextbookshop.com - Parser Error Handling and Recovery
# =============================================================================

import argparse
import enum
import logging
import sys
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CONSTANTS AND TUNABLES
# ---------------------------------------------------------------------------
MAX_DEPTH_DEFAULT = 18   # Root container is depth 0 - stops unbounded nesting attacks

_DIGITS     = "0123456789"
_NONZERO    = "123456789"
_HEX        = "0123456789abcdefABCDEF"
_ESCAPES    = "\"\\/bfnrt"
_WHITESPACE = " \t\n\r"   # RFC 8259 insignificant whitespace only

# ---------------------------------------------------------------------------
# ERRORS
# ---------------------------------------------------------------------------
class JSONValidationError(SyntaxError):
    """
    Base class for every rejection. Malformed input is a SyntaxError, same as
    the rest of the tool chain expects.

    `kind` names the failure class, `fragment` holds the offending text when
    one is known.
    """
    kind = "invalid"

    def __init__(self, message: str, fragment: Optional[str] = None):
        super().__init__(message)
        self.fragment = fragment


class NotContainerError(JSONValidationError):
    kind = "not_container"

    def __init__(self, fragment: Optional[str] = None):
        super().__init__("json is neither object nor array", fragment)


class TooDeepError(JSONValidationError):
    kind = "too_deep"

    def __init__(self, fragment: Optional[str] = None):
        super().__init__("too deep", fragment)


class InvalidLeafError(JSONValidationError):
    kind = "invalid_leaf"

    def __init__(self, fragment: str):
        super().__init__(f"invalid json {fragment}", fragment)


class InvalidKeyValueError(JSONValidationError):
    kind = "invalid_key_value"

    def __init__(self, fragment: str):
        super().__init__(f"invalid key-value pair {fragment}", fragment)


class ExtraCommaError(JSONValidationError):
    kind = "extra_comma"

    def __init__(self, fragment: Optional[str] = None):
        super().__init__("extra comma", fragment)

# ---------------------------------------------------------------------------
# FRAGMENT RECORD
# ---------------------------------------------------------------------------
class Fragment(NamedTuple):
    """
    Immutable worklist entry: (text, depth).

    `text` is an unvalidated slice of the input. `depth` counts the containers
    already entered above it, -1 for the whole input.
    """
    text: str
    depth: int

# ---------------------------------------------------------------------------
# WORKLIST
# ---------------------------------------------------------------------------
class Worklist:
    """
    LIFO of fragments. Iterating pops until empty, so entries pushed while
    iterating are picked up on the next step.
    """
    def __init__(self, fragments: Iterable[Fragment] = ()):
        self._items: List[Fragment] = list(fragments)

    def __iter__(self):
        return self

    def __next__(self) -> Fragment:
        if not self._items:
            raise StopIteration
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, fragment: Fragment):
        self._items.append(fragment)

    def extend(self, fragments: Iterable[Fragment]):
        self._items.extend(fragments)

# ---------------------------------------------------------------------------
# LEAF CLASSIFIER
# ---------------------------------------------------------------------------
def is_string(text: str) -> bool:
    """
    Quoted string with RFC 8259 escapes only.

    Rejects unescaped quotes and raw control characters (bare newline and
    tab included). A \\u escape needs exactly four hex digits.
    """
    if len(text) < 2 or text[0] != '"' or text[-1] != '"':
        return False
    inner = text[1:-1]
    i = 0
    n = len(inner)
    while i < n:
        ch = inner[i]
        if ch == "\\":
            if i + 1 >= n:
                return False    # the closing quote was escaped
            esc = inner[i + 1]
            if esc == "u":
                hexpart = inner[i + 2:i + 6]
                if len(hexpart) != 4 or not all(c in _HEX for c in hexpart):
                    return False
                i += 6
                continue
            if esc not in _ESCAPES:
                return False
            i += 2
            continue
        if ch == '"' or ord(ch) < 0x20:
            return False
        i += 1
    return True


def _skip_digits(text: str, i: int) -> int:
    while i < len(text) and text[i] in _DIGITS:
        i += 1
    return i


def is_number(text: str) -> bool:
    """Optional sign, 0 or [1-9][0-9]*, optional fraction, optional exponent."""
    n = len(text)
    i = 0
    if i < n and text[i] in "+-":
        i += 1
    if i >= n:
        return False
    if text[i] == "0":
        i += 1
    elif text[i] in _NONZERO:
        i = _skip_digits(text, i + 1)
    else:
        return False

    if i < n and text[i] == ".":
        start = i + 1
        i = _skip_digits(text, start)
        if i == start:
            return False

    if i < n and text[i] in "eE":
        i += 1
        if i < n and text[i] in "+-":
            i += 1
        start = i
        i = _skip_digits(text, start)
        if i == start:
            return False

    return i == n


def is_bool(text: str) -> bool:
    return text == "true" or text == "false"


def is_null(text: str) -> bool:
    return text == "null"


def is_leaf(text: str) -> bool:
    return is_string(text) or is_number(text) or is_bool(text) or is_null(text)

# ---------------------------------------------------------------------------
# STRUCTURAL SPLITTER
# ---------------------------------------------------------------------------
class Scope(enum.Enum):
    OBJECT = "{"
    ARRAY  = "["
    STRING = '"'


_OPENERS = {"{": Scope.OBJECT, "[": Scope.ARRAY}
_CLOSERS = {"}": Scope.OBJECT, "]": Scope.ARRAY}


def _segments(interior: str) -> Iterator[Tuple[str, bool]]:
    """
    Yield (segment, comma_seen) for each top-level comma-separated segment.

    The scope stack only decides whether a comma is top-level. Mismatched
    closers are ignored here; pairing is checked when a child is classified.
    """
    scopes: List[Scope] = []
    buf: List[str] = []
    escape = False
    comma_seen = False

    for ch in interior:
        if escape:
            buf.append(ch)
            escape = False
            continue

        top = scopes[-1] if scopes else None
        if ch == "," and top is None:
            comma_seen = True
            yield "".join(buf), comma_seen
            buf = []
            continue

        buf.append(ch)
        if ch in _OPENERS:
            if top is not Scope.STRING:
                scopes.append(_OPENERS[ch])
        elif ch == '"':
            if top is Scope.STRING:
                scopes.pop()
            else:
                scopes.append(Scope.STRING)
        elif ch in _CLOSERS:
            if top is _CLOSERS[ch]:
                scopes.pop()
        elif ch == "\\":
            escape = True

    if buf:
        yield "".join(buf), comma_seen


def _check_trailing_comma(body: str):
    if body.endswith(","):
        raise ExtraCommaError(body)


def split_array(interior: str, depth: int) -> List[Fragment]:
    """Split an array interior into one child fragment per element."""
    body = interior.strip(_WHITESPACE)
    children: List[Fragment] = []
    for segment, _ in _segments(body):
        value = segment.strip(_WHITESPACE)
        if not value:
            raise ExtraCommaError(body)
        children.append(Fragment(value, depth))
    _check_trailing_comma(body)
    return children


def _key_end(pair: str) -> int:
    """Index of the quote closing the leading key, -1 if there is none."""
    if not pair.startswith('"'):
        return -1
    i = 1
    while i < len(pair):
        ch = pair[i]
        if ch == "\\":
            i += 2
            continue
        if ch == '"':
            return i
        i += 1
    return -1


def _pair_value(pair: str) -> str:
    """Strip `"key" :` off an object member and return the value text."""
    end = _key_end(pair)
    if end < 0 or not is_string(pair[:end + 1]):
        raise InvalidKeyValueError(pair)
    rest = pair[end + 1:].lstrip(_WHITESPACE)
    if not rest.startswith(":"):
        raise InvalidKeyValueError(pair)
    value = rest[1:].strip(_WHITESPACE)
    if not value:
        raise InvalidKeyValueError(pair)
    return value


def split_object(interior: str, depth: int) -> List[Fragment]:
    """
    Split an object interior into one child fragment per member value.

    Keys are checked here and dropped; only the values go back on the
    worklist. An empty body yields no children.
    """
    body = interior.strip(_WHITESPACE)
    children: List[Fragment] = []
    for segment, comma_seen in _segments(body):
        pair = segment.strip(_WHITESPACE)
        if not pair:
            if comma_seen:
                raise ExtraCommaError(body)
            continue
        children.append(Fragment(_pair_value(pair), depth))
    _check_trailing_comma(body)
    return children

# ---------------------------------------------------------------------------
# DEPTH GUARD
# ---------------------------------------------------------------------------
def _guard_depth(depth: int, max_depth: int, text: str) -> int:
    if depth > max_depth:
        logger.debug("depth %d exceeds ceiling %d", depth, max_depth)
        raise TooDeepError(text)
    return depth

# ---------------------------------------------------------------------------
# VALIDATION DRIVER
# ---------------------------------------------------------------------------
def _container_scope(body: str) -> Optional[Scope]:
    if len(body) < 2:
        return None
    if body[0] == "{" and body[-1] == "}":
        return Scope.OBJECT
    if body[0] == "[" and body[-1] == "]":
        return Scope.ARRAY
    return None


def walk(text: str, *, max_depth: int = MAX_DEPTH_DEFAULT) -> Iterator[Fragment]:
    """
    Validate `text` fragment by fragment, yielding each trimmed fragment once
    it has been accepted.

    Children of a container are pushed in source order, so the last sibling
    is visited first and the first error met in that order is raised. Any
    error ends the walk.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")

    worklist = Worklist([Fragment(text, -1)])
    entered = False

    for fragment in worklist:
        body = fragment.text.strip(_WHITESPACE)
        # Splitters never emit an empty child ({"a":} fails in _pair_value);
        # an empty non-root fragment pushed by any other caller counts as valid.
        if not body and fragment.depth >= 0:
            continue

        scope = _container_scope(body)
        if scope is not None:
            entered = True
            depth = _guard_depth(fragment.depth + 1, max_depth, body)
            split = split_object if scope is Scope.OBJECT else split_array
            children = split(body[1:-1], depth)
            logger.debug("%s at depth %d -> %d children", scope.name.lower(), depth, len(children))
            worklist.extend(children)
        elif not is_leaf(body):
            logger.debug("no leaf form matches at depth %d: %r", fragment.depth, body)
            raise InvalidLeafError(body)

        yield Fragment(body, fragment.depth)

    if not entered:
        raise NotContainerError(text.strip(_WHITESPACE))

# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def check(text: str, *, max_depth: int = MAX_DEPTH_DEFAULT):
    """
    Raise the first JSONValidationError found in `text`, return None if it
    is valid JSON with an object or array at the root.
    """
    for _ in walk(text, max_depth=max_depth):
        pass


def validate(text: str, *, max_depth: int = MAX_DEPTH_DEFAULT) -> Tuple[bool, Optional[JSONValidationError]]:
    """
    Verdict plus reason: (True, None) or (False, error).

    No side effects; the same input always yields the same result.
    """
    try:
        check(text, max_depth=max_depth)
    except JSONValidationError as exc:
        logger.debug("rejected (%s): %s", exc.kind, exc)
        return False, exc
    return True, None

# ---------------------------------------------------------------------------
# CLI ENTRYPOINT
# ---------------------------------------------------------------------------
def _cli(argv: List[str]) -> int:
    """
    Command-line interface for validation runs.

    0 when the file holds valid JSON, 1 on any rejection or read failure.
    """
    ap = argparse.ArgumentParser(description="CCT JSON validator")
    ap.add_argument("file", help="JSON file to verify")
    ap.add_argument("--debug", action="store_true", help="print every fragment visited before the verdict")
    ap.add_argument("--max-depth", type=int, default=MAX_DEPTH_DEFAULT)
    ap.add_argument("-v", "--verbose", action="store_true", help="log driver activity to stderr")
    args = ap.parse_args(argv)

    if args.max_depth < 0:
        ap.error("--max-depth must be non-negative")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        with open(args.file, "r", encoding="utf-8") as fh:
            data = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"cannot read {args.file}: {exc}", file=sys.stderr)
        return 1

    if args.debug:
        try:
            for fragment in walk(data, max_depth=args.max_depth):
                print(f"{fragment.depth}\t{fragment.text}")
        except JSONValidationError as exc:
            print(exc, file=sys.stderr)
            return 1
        print("valid json")
        return 0

    valid, error = validate(data, max_depth=args.max_depth)
    if not valid:
        print(error, file=sys.stderr)
        return 1
    print("valid json")
    return 0


def main() -> int:
    return _cli(sys.argv[1:])

# ---------------------------------------------------------------------------
# MAIN GUARD
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(main())
# viper1 out
