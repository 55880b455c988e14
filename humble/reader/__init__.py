from humble.reader.parser import tokenize, read, read_all, TokenStream

__all__ = ["tokenize", "read", "read_all", "TokenStream"]
