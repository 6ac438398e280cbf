from qlisp.reader.parser import ParseNode, lex, parse, TokenStream
from qlisp.reader.reader import read

__all__ = ("ParseNode", "lex", "parse", "TokenStream", "read")
