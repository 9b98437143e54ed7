"""Tokenizer, reader and expression types for minilisp.

The grammar is about as small as a Lisp can get:

```
<expr> ::= <atom>                   ; "atom"
         | "(" <expr>* ")"          ; "list"
<atom> ::= <number> | <symbol>      ; anything that parses as a number is a number, everything else is a symbol
```

Parentheses always separate tokens, whitespace separates everything else. There are no string, boolean or quote
literals: `(quote x)` is the only way to keep something from being evaluated.
"""

from abc import abstractmethod, ABC
from collections import deque

from minilisp.lang.error import UnexpectedCloseParen, UnexpectedEndOfInput


def parse_number(token):
    """Parses token as the one numeric kind (float). Raises ValueError if token isn't a numeric literal."""
    if "_" in token:
        raise ValueError(f"'{token}' is not a numeric literal")  # float() would accept digit separators
    return float(token)


def display_number(value):
    """Integral values are shown without a fractional part (up to 1e16, past which floats stop being exact)."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


class Expression(ABC):
    """Superclass that represents any value a minilisp program can produce or manipulate."""

    @abstractmethod
    def display(self):
        """Returns the program text for this expression."""

    def __str__(self):
        return self.display()


class Number(Expression):
    """The one numeric kind. Wraps a float, but compares equal to plain Python numbers of the same value."""

    def __init__(self, value):
        self.value = float(value)

    def display(self):
        return display_number(self.value)

    def __repr__(self):
        return f"Number({self.display()})"

    def __eq__(self, other):
        if isinstance(other, Number):
            return other.value == self.value
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return other == self.value
        return False

    def __hash__(self):
        return hash(self.value)


class Symbol(Expression):
    """Identifier, resolved against an Environment at evaluation time."""

    def __init__(self, name):
        self.name = name

    def display(self):
        return self.name

    def __repr__(self):
        return f"Symbol('{self.name}')"

    def __eq__(self, other):
        return isinstance(other, Symbol) and other.name == self.name

    def __hash__(self):
        return hash(self.name)


class List(Expression):
    """Parenthesized form. Used both as program structure and as quoted data."""

    def __init__(self, items=None):
        self.items = list(items) if items is not None else []

    def display(self):
        return "(" + " ".join(item.display() for item in self.items) + ")"

    def append(self, item):
        self.items.append(item)

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    def __repr__(self):
        return f"List({self.items!r})"

    def __eq__(self, other):
        return isinstance(other, List) and other.items == self.items

    __hash__ = None


def tokenize(text):
    """Splits text into a list of tokens: '(', ')' and atoms."""
    return text.replace("(", " ( ").replace(")", " ) ").split()


def atom(token):
    """Classifies token as a Number if it parses as one, otherwise as a Symbol holding token verbatim."""
    try:
        return Number(parse_number(token))
    except ValueError:
        return Symbol(token)


def read_from_tokens(tokens, text=""):
    """Reads one expression off the front of tokens, consuming everything it reads. tokens must be a deque. text is
    only used for error messages.
    """
    if not tokens:
        raise UnexpectedEndOfInput(text)

    token = tokens.popleft()
    if token == "(":
        expr = List()
        while tokens and tokens[0] != ")":
            expr.append(read_from_tokens(tokens, text))
        if not tokens:
            raise UnexpectedEndOfInput(text)
        tokens.popleft()  # closing ')'
        return expr

    elif token == ")":
        raise UnexpectedCloseParen(text)

    return atom(token)


def parse(text):
    """Reads the first expression in text. Anything after it is ignored."""
    return read_from_tokens(deque(tokenize(text)), text.strip())
