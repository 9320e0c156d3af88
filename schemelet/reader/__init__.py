from schemelet.reader.parser import lex, TokenStream, parse_number, read_expr, read_expr_list

__all__ = ["lex", "TokenStream", "parse_number", "read_expr", "read_expr_list"]
