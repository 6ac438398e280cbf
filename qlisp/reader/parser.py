"""
  Lexer and parser for qlisp source text

The core never looks at text: it reads a generic tagged parse tree. This module
is the small grammar that produces such a tree, so that source can be fed to
the Reader from tests, the prelude loader and the Interpreter.

    number : /-?[0-9]+(\\.[0-9]*)?/
    symbol : /[a-zA-Z0-9_+\\-*\\/%\\\\=<>!&]+/
    sexpr  : '(' <expr>* ')'
    qexpr  : '{' <expr>* '}'
    expr   : <number> | <symbol> | <sexpr> | <qexpr>
    lsp    : /^/ <expr>* /$/

Tree shape:

    - whole input      -> ParseNode("root") with "regex" anchors first and last
    - ( ... )          -> ParseNode("list-paren") with "char" delimiters
    - { ... }          -> ParseNode("list-brace") with "char" delimiters
    - number / symbol  -> leaf ParseNode carrying the raw text
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Optional

from qlisp.errors import QlispSyntaxError

# Node tags
ROOT = "root"
NUMBER = "number"
SYMBOL = "symbol"
LIST_PAREN = "list-paren"
LIST_BRACE = "list-brace"
CHAR = "char"
REGEX = "regex"

TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<number>-?[0-9]+(?:\.[0-9]*)?(?![a-zA-Z0-9_+\-*/%\\=<>!&.]))"  # digits not glued to a symbol
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/%\\=<>!&]+)"
    r")",
    re.DOTALL,
)

TOKEN_TYPES = ("lparen", "rparen", "lbrace", "rbrace", NUMBER, SYMBOL)

CLOSERS = {"lparen": "rparen", "lbrace": "rbrace"}
LIST_TAGS = {"lparen": LIST_PAREN, "lbrace": LIST_BRACE}


@dataclass
class ParseNode:
    tag: str
    contents: str = ""
    children: list[ParseNode] = field(default_factory=list)
    position: int = 0

    def __str__(self) -> str:
        if not self.children:
            return self.contents
        return " ".join(str(c) for c in self.children if c.tag != REGEX)


def lex(source: str) -> Iterator[tuple[str, str, int]]:
    """Token generator: yields (token_type, token_value, position) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos:].strip() == "":
                break
            bad = len(source) - len(source[pos:].lstrip())
            raise QlispSyntaxError(f"Unexpected char at {bad}: {source[bad]!r}", bad)
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in TOKEN_TYPES:
            if m.group(nm):
                yield nm, m.group(nm), m.start(1)
                break


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str, int]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str, int]] = []

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, -1
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], int]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, -1))

    def parse_expr(self) -> Optional[ParseNode]:
        tok_type, tok_val, pos = self.peek()
        if tok_type is None:
            return None

        if tok_type in (NUMBER, SYMBOL):
            self.advance()
            return ParseNode(tok_type, tok_val, position=pos)

        if tok_type in CLOSERS:
            self.advance()
            closer = CLOSERS[tok_type]
            node = ParseNode(LIST_TAGS[tok_type], position=pos)
            node.children.append(ParseNode(CHAR, tok_val, position=pos))
            while True:
                nxt_type, nxt_val, nxt_pos = self.peek()
                if nxt_type is None:
                    raise QlispSyntaxError(f"Unmatched '{tok_val}' at {pos}", pos)
                if nxt_type == closer:
                    self.advance()
                    node.children.append(ParseNode(CHAR, nxt_val, position=nxt_pos))
                    return node
                if nxt_type in ("rparen", "rbrace"):
                    raise QlispSyntaxError(
                        f"Mismatched '{nxt_val}' at {nxt_pos} closing '{tok_val}' at {pos}",
                        nxt_pos,
                    )
                node.children.append(self.parse_expr())

        raise QlispSyntaxError(f"Unexpected '{tok_val}' at {pos}", pos)

    def parse_all(self) -> Iterator[ParseNode]:
        while True:
            tok_type, _, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> ParseNode:
    """Parse a whole input into a root node: /^/ <expr>* /$/."""
    root = ParseNode(ROOT, source)
    root.children.append(ParseNode(REGEX, "", position=0))
    root.children.extend(TokenStream(lex(source)).parse_all())
    root.children.append(ParseNode(REGEX, "", position=len(source)))
    return root
