from iota.reader.parser import lex, atom, parse, parse_all, read_from_tokens, TokenStream

__all__ = ["lex", "atom", "parse", "parse_all", "read_from_tokens", "TokenStream"]
