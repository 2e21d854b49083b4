class CompileError(Exception):
    """Base class of every error a single compilation can fail with."""
    offset: int = -1


class LexError(CompileError):
    def __init__(self, char: str, offset: int, reason: str = "Unexpected character"):
        self.char = char
        self.offset = offset
        Exception.__init__(self, f"[0001] {reason} {char!r} at position {offset}")


class ParseError(CompileError):
    def __init__(self, token_kind: str, offset: int = -1):
        self.token_kind = token_kind
        self.offset = offset
        where = f" at position {offset}" if offset >= 0 else ""
        Exception.__init__(self, f"[0002] Unexpected token: {token_kind}{where}")


class InlineRecursionError(CompileError):
    def __init__(self, name: str, chain: tuple[str, ...]):
        self.name = name
        self.chain = chain
        expansion = " -> ".join([*chain, name])
        Exception.__init__(self, f"[0003] Cannot inline '{name}', expansion does not terminate: {expansion}")


class InternalError(CompileError):
    def __init__(self, node_kind: str):
        self.node_kind = node_kind
        Exception.__init__(self, f"[0004] Unknown node kind '{node_kind}' reached code generation. Report as bug.")


class NestingDepthError(CompileError):
    def __init__(self, max_depth: int, offset: int = -1):
        self.max_depth = max_depth
        self.offset = offset
        where = f" at position {offset}" if offset >= 0 else ""
        Exception.__init__(self, f"[0005] Expressions nest deeper than {max_depth} levels{where}")
