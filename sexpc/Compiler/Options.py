from dataclasses import dataclass


@dataclass
class CompilerOptions:
    # Run constant folding, dead code elimination and inlining between parsing and transformation.
    optimize: bool = False

    # How many inline expansions may nest inside each other before inlining gives up.
    max_inline_depth: int = 32

    # How deeply calls and binary expressions may nest in the source. Every later stage walks the tree recursively.
    max_nesting_depth: int = 100
