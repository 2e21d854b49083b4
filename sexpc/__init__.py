from sexpc.Compiler.Compiler import Compiler, compile
from sexpc.Compiler.Exceptions import CompileError
from sexpc.Compiler.Options import CompilerOptions
