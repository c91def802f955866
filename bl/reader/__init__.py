from bl.reader.parser import Reader, RPAREN, lex, parse_integer
from bl.reader.line_source import LineSource, PromptLineSource, StreamLineSource, IterLineSource
