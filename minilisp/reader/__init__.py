from minilisp.reader.lexer import lex, tokenize, Token
from minilisp.reader.parser import TokenStream, parse, parse_program

__all__ = ["lex", "tokenize", "Token", "TokenStream", "parse", "parse_program"]
