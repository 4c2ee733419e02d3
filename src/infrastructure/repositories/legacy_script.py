"""Reader and writer for the demo page's ``config.js`` script.

The browser demo ships its settings as a single object literal assigned
to a variable::

    let myconfig = {
       ipaddr: "192.168.42.201",
       port: 2000,
       output_names: [
          '', /* This entry is not used but must be present. */
          'Relay 1',
       ]
    }

Only the subset of JavaScript such a file uses is understood: one optional
``let``/``var``/``const`` declaration, object and array literals, quoted
strings, numbers, ``true``/``false``/``null``, comments and trailing commas.
"""
import json
import re
from typing import Any, Iterator, List, Optional, Tuple

from src.domain.entities.device_config import DeviceConfiguration
from src.domain.errors import ConfigError
from src.infrastructure.config.raw_config import LEGACY_KEYS

SOURCE_FIELD = "<source>"
DEFAULT_VARIABLE = "myconfig"

_TOKEN_RE = re.compile(r"""
    (?P<ws>\s+)
  | (?P<comment>//[^\n]*|/\*.*?\*/)
  | (?P<string>'(?:[^'\\\n]|\\.)*'|"(?:[^"\\\n]|\\.)*")
  | (?P<number>-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)
  | (?P<ident>[A-Za-z_$][A-Za-z0-9_$]*)
  | (?P<punct>[{}\[\],:;=])
""", re.VERBOSE | re.DOTALL)

_ESCAPES = {
    'n': '\n', 't': '\t', 'r': '\r', 'b': '\b', 'f': '\f', 'v': '\v', '0': '\0',
}
_ESCAPE_RE = re.compile(r"\\(u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|.)", re.DOTALL)
_KEYWORDS = {'true': True, 'false': False, 'null': None}
_DECLARATIONS = ('let', 'var', 'const')
MAX_NESTING = 64

Token = Tuple[str, str, int]


def _unescape(body: str) -> str:
    def _replace(match):
        seq = match.group(1)
        if seq[0] in 'ux' and len(seq) > 1:
            return chr(int(seq[1:], 16))
        return _ESCAPES.get(seq, seq)
    return _ESCAPE_RE.sub(_replace, body)


def _tokenize(text: str) -> Iterator[Token]:
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if not match:
            line = text.count('\n', 0, pos) + 1
            raise ConfigError(SOURCE_FIELD, f"line {line}: unexpected character {text[pos]!r}")
        kind = match.lastgroup
        if kind not in ('ws', 'comment'):
            yield kind, match.group(), pos
        pos = match.end()


class _Parser:
    """Recursive-descent parser over the token stream."""

    def __init__(self, text: str):
        self.text = text
        self.tokens: List[Token] = list(_tokenize(text))
        self.index = 0
        self.depth = 0

    def _error(self, message: str, token: Optional[Token] = None) -> ConfigError:
        if token is None:
            return ConfigError(SOURCE_FIELD, f"unexpected end of input: {message}")
        line = self.text.count('\n', 0, token[2]) + 1
        return ConfigError(SOURCE_FIELD, f"line {line}: {message}, got {token[1]!r}")

    def _peek(self) -> Optional[Token]:
        return self.tokens[self.index] if self.index < len(self.tokens) else None

    def _next(self, expected: str) -> Token:
        token = self._peek()
        if token is None:
            raise self._error(f"expected {expected}")
        self.index += 1
        return token

    def _expect(self, punct: str) -> None:
        token = self._next(repr(punct))
        if token[0] != 'punct' or token[1] != punct:
            raise self._error(f"expected {punct!r}", token)

    def _at(self, punct: str) -> bool:
        token = self._peek()
        return token is not None and token[0] == 'punct' and token[1] == punct

    def parse_document(self) -> Tuple[Optional[str], Any]:
        variable = None
        token = self._peek()
        if token is not None and token[0] == 'ident' and token[1] in _DECLARATIONS:
            self.index += 1
            token = self._peek()
        if token is not None and token[0] == 'ident' and token[1] not in _KEYWORDS:
            variable = self._next("variable name")[1]
            self._expect('=')

        value = self.parse_value()
        if self._at(';'):
            self.index += 1
        trailing = self._peek()
        if trailing is not None:
            raise self._error("expected end of script", trailing)
        return variable, value

    def parse_value(self) -> Any:
        token = self._next("a value")
        kind, text, _ = token
        if kind == 'punct' and text in ('{', '['):
            if self.depth >= MAX_NESTING:
                raise self._error(f"nesting too deep (limit {MAX_NESTING})", token)
            self.depth += 1
            try:
                return self._parse_object() if text == '{' else self._parse_array()
            finally:
                self.depth -= 1
        if kind == 'string':
            return _unescape(text[1:-1])
        if kind == 'number':
            if any(c in text for c in '.eE'):
                return float(text)
            return int(text)
        if kind == 'ident' and text in _KEYWORDS:
            return _KEYWORDS[text]
        raise self._error("expected a value", token)

    def _parse_object(self) -> dict:
        result = {}
        while not self._at('}'):
            token = self._next("a key or '}'")
            kind, text, _ = token
            if kind == 'ident':
                key = text
            elif kind == 'string':
                key = _unescape(text[1:-1])
            elif kind == 'number':
                key = text
            else:
                raise self._error("expected a key", token)
            self._expect(':')
            result[key] = self.parse_value()
            if not self._at('}'):
                self._expect(',')
        self._expect('}')
        return result

    def _parse_array(self) -> list:
        result = []
        while not self._at(']'):
            result.append(self.parse_value())
            if not self._at(']'):
                self._expect(',')
        self._expect(']')
        return result


def parse_legacy_script(text: str) -> Tuple[Optional[str], dict]:
    """Parse a demo-page config script.

    Args:
        text: Script source

    Returns:
        Tuple of the assigned variable name (None for a bare literal) and
        the object literal as a dict

    Raises:
        ConfigError: If the script is not a single object literal
    """
    variable, value = _Parser(text).parse_document()
    if not isinstance(value, dict):
        raise ConfigError(SOURCE_FIELD, f"expected an object literal, got {type(value).__name__}")
    return variable, value


def render_legacy_script(config: DeviceConfiguration, variable: str = DEFAULT_VARIABLE) -> str:
    """Render a configuration as a demo-page config script.

    JSON string literals are valid JavaScript, so values are quoted with
    json.dumps.
    """
    if not re.fullmatch(r"[A-Za-z_$][A-Za-z0-9_$]*", variable) or variable in _KEYWORDS:
        raise ValueError(f"Invalid JavaScript identifier: {variable!r}")

    record = config.to_dict()
    lines = [f"let {variable} = {{"]
    for field in ('address', 'port', 'path', 'networkTimeoutMs', 'pollIntervalMs'):
        lines.append(f"   {LEGACY_KEYS[field]}: {json.dumps(record[field])},")

    lines.append(f"   {LEGACY_KEYS['outputNames']}: [")
    names = record['outputNames']
    for i, name in enumerate(names):
        sep = ',' if i < len(names) - 1 else ''
        entry = f"      {json.dumps(name)}{sep}"
        if i == 0:
            entry += " /* Entry 0 is reserved and never addressed. */"
        lines.append(entry)
    lines.append("   ]")
    lines.append("}")
    return "\n".join(lines) + "\n"
