from rsp.reader.parser import lex, parse_one, parse_all, Reader

__all__ = ["lex", "parse_one", "parse_all", "Reader"]
